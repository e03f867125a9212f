"""URL query flags, navigation and page-mount fetch intents."""
