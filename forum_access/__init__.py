"""
forum_access 앱

- 사용자별 포럼 연결(allow-list)을 UserMeta에 저장하고
  포럼 조회/목록 노출 여부를 판단합니다.
- 관리자(superuser 또는 관리 권한 보유자)는 연결 여부와 무관하게 모두 조회 가능.
"""
