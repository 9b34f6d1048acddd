"""Helper functions exposed to document templates under their template names."""

from typing import Any, Callable

from tukutil.ids import new_id, new_uuid
from tukutil.lookup import get_code_system_val
from tukutil.text import split_xdw_key
from tukutil.timeutil import pretty_time, tuk_day, tuk_month, tuk_time, tuk_year


def template_func_map() -> dict[str, Callable[..., Any]]:
    """Name -> helper mapping for registering with a template renderer."""
    return {
        "dtday": tuk_day,
        "dtmonth": tuk_month,
        "dtyear": tuk_year,
        "mappedid": get_code_system_val,
        "prettytime": pretty_time,
        "newUuid": new_uuid,
        "newid": new_id,
        "splitxdwkey": split_xdw_key,
        "tuktime": tuk_time,
    }
