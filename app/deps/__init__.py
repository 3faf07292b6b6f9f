# Marks `app.deps` as a real Python package so imports like
# `from app.deps.settings import get_app_settings` work reliably.
