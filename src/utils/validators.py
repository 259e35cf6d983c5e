from typing import List, Mapping, Optional

from .constants import REQUIRED_ENV_VARS


def check_required_env(snapshot: Optional[Mapping[str, object]]) -> List[str]:
    """ตรวจสอบตัวแปรสภาพแวดล้อมที่จำเป็น

    Args:
        snapshot: mapping ของชื่อตัวแปรกับค่าที่ได้ตอนเริ่มโปรแกรม

    Returns:
        List[str]: ชื่อตัวแปรที่ไม่มีหรือเป็นค่าว่าง เรียงตาม REQUIRED_ENV_VARS
    """
    snapshot = snapshot or {}
    return [var for var in REQUIRED_ENV_VARS if not snapshot.get(var)]
