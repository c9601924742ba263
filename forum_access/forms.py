# forum_access/forms.py

from __future__ import annotations

from django import forms

from .constants import FIELD_NAME


class ForumAssociationForm(forms.Form):
    """
    ✅ 포럼 연결 체크박스 폼 (렌더링용)
    - choices: 게시된 포럼 [(id, title)]
    - 저장 시에는 parse_submitted_forum_ids로 정규화 (선택지 검증 없음)
    """

    def __init__(self, *args, forums=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fields[FIELD_NAME] = forms.TypedMultipleChoiceField(
            label="",
            required=False,
            coerce=int,
            choices=[(fid, title) for fid, title in forums],
            widget=forms.CheckboxSelectMultiple(attrs={"class": "form-check-input"}),
        )

    @property
    def associations(self):
        return self[FIELD_NAME]

    def has_forums(self) -> bool:
        return bool(self.fields[FIELD_NAME].choices)
