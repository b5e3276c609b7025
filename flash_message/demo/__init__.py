"""Demo application showing the plugin wired into FastAPI."""
