"""Static configuration for the checklist assistant.

All user-editable settings (responsible name, templates, fallback code
prefix, logging) live in a single JSON file for quick edits without touching
Python. This module only decides where that file lives.
"""

import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# A local .env can point the CLI at another config file, e.g. a shared one.
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")

CONFIG_PATH = os.getenv("CHECKLIST_CONFIG", DEFAULT_CONFIG_PATH)

# Relative log paths in config.json are resolved against the project root.
DEFAULT_LOG_PATH = "logs/checklist.log"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5
