"""
AIRAC cycle constants.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

# First cycle of 2020; every cycle start is a whole number of cycles away
ANCHOR_DATE = date(2020, 1, 2)

CYCLE_DAYS = 28
CYCLE_LENGTH = relativedelta(days=CYCLE_DAYS)
