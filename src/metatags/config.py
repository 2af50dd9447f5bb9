import os
from dotenv import load_dotenv

load_dotenv()

SETTINGS_PATH = os.getenv("METATAGS_SETTINGS", "settings.toml")

# Overrides [translations].locale from the settings file when set
LOCALE = os.getenv("METATAGS_LOCALE") or None
