"""KMA village forecast issuance schedule.

Forecasts are issued eight times a day (02, 05, ... 23 KST) and become
available ten minutes after issuance. The request must name the issuance
(base date and time) it wants.
"""

from datetime import datetime, timedelta

from lifecast.models.common import KST, kst_now

ISSUE_HOURS = (2, 5, 8, 11, 14, 17, 20, 23)
PUBLISH_DELAY = timedelta(minutes=10)


def base_date_time(now: datetime | None = None) -> tuple[str, str]:
    """Latest available issuance as ('YYYYMMDD', 'HHMM') in KST.

    Naive datetimes are taken to be KST already. Before 02:10 the latest
    issuance is the previous day's 2300.
    """
    if now is None:
        now = kst_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=KST)
    else:
        now = now.astimezone(KST)

    available = now - PUBLISH_DELAY
    issued = [h for h in ISSUE_HOURS if h <= available.hour]
    if not issued:
        previous_day = available - timedelta(days=1)
        return previous_day.strftime("%Y%m%d"), f"{ISSUE_HOURS[-1]:02d}00"
    return available.strftime("%Y%m%d"), f"{issued[-1]:02d}00"
