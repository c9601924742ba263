# forum_access/utils/parsing.py
# =========================================================
# Input Parsing
# - 폼/AJAX 입력을 정수 forum ID 집합으로 정규화
# - 저장소/권한 판단 쪽에서는 형변환을 하지 않음 (여기서 끝냄)
# =========================================================

from __future__ import annotations

import re
from typing import Any, Iterable, Optional, Set

from ..constants import FIELD_NAME, MAX_ID_DIGITS

# forum_associations[12]=1 형식(체크박스 키에 ID를 넣는 방식)
_BRACKET_KEY_RE = re.compile(r"^" + re.escape(FIELD_NAME) + r"\[(\s*\d+\s*)\]$")


def to_str(v: Any) -> str:
    """None/공백 입력을 안전하게 문자열로 정규화"""
    return str(v or "").strip()


def to_positive_int(v: Any) -> Optional[int]:
    """
    ✅ 양의 정수만 허용
    - int(>0) 그대로, 숫자 문자열은 int 변환
    - bool / 0 / 음수 / 그 외 값은 None
    """
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v if v > 0 else None
    s = to_str(v)
    # ASCII 숫자만 (위첨자 등 유니코드 숫자 제외), BigAutoField 범위 내 자릿수
    if not (s.isascii() and s.isdigit()) or len(s) > MAX_ID_DIGITS:
        return None
    try:
        n = int(s)
    except ValueError:
        return None
    return n if n > 0 else None


def _raw_values(raw: Any) -> Iterable[Any]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        # {forum_id: "1"} 형식
        return list(raw.keys())
    if isinstance(raw, (list, tuple, set, frozenset)):
        return list(raw)
    return [raw]


def parse_submitted_forum_ids(data: Any) -> Set[int]:
    """
    ✅ 제출된 체크박스 상태 → forum ID set
    - QueryDict: getlist("forum_associations") + "forum_associations[<id>]" 키
    - dict: 값이 list/dict/단일값 모두 허용
    - 누락/손상 데이터는 "연결 없음"(빈 set)으로 처리 (검증 에러 아님)
    """
    if not data or not hasattr(data, "keys"):
        return set()

    values = []
    getlist = getattr(data, "getlist", None)
    if callable(getlist):
        values.extend(getlist(FIELD_NAME))
    elif FIELD_NAME in data:
        values.extend(_raw_values(data[FIELD_NAME]))

    for key in data.keys():
        m = _BRACKET_KEY_RE.match(str(key))
        if m:
            values.append(m.group(1))

    ids = set()
    for v in values:
        n = to_positive_int(v)
        if n:
            ids.add(n)
    return ids
