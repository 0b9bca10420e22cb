from app.utils.dates import get_now
