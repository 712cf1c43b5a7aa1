"""Global test fixtures."""

import os

import logfire

# Keep tests away from the real ~/.local/share/blogstore database.
# This must happen at module load time, before any Config is built.
os.environ.setdefault("BLOGSTORE_DATA_DIR", os.path.join(os.getcwd(), ".pytest-blogstore"))

logfire.configure(send_to_logfire=False, console=False)
