# reprova/utils.py
import datetime as dt

def _now():
    return dt.datetime.now(dt.timezone.utc).isoformat()
