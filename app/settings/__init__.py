from app.settings.app_settings import Settings, settings
from app.settings.log_settings import FourtogenicLogger
