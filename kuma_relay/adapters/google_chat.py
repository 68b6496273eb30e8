# kuma_relay/adapters/google_chat.py
"""
Google Chat cardsV2 메시지 모델

Widget 은 decoratedText / textParagraph / buttonList 중 하나만 갖는 variant 로 표현한다.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class _CardModel(BaseModel):
    # 한 번 만든 카드는 수정하지 않는다
    model_config = ConfigDict(frozen=True)


class DecoratedText(_CardModel):
    topLabel: Optional[str] = None
    text: str


class TextParagraph(_CardModel):
    text: str


class OpenLink(_CardModel):
    url: str


class OnClick(_CardModel):
    openLink: OpenLink


class Button(_CardModel):
    text: str
    onClick: Optional[OnClick] = None


class ButtonList(_CardModel):
    buttons: List[Button]


class DecoratedTextWidget(_CardModel):
    """ex) { "decoratedText": { "topLabel": "URL", "text": "https://example.com" } }"""

    decoratedText: DecoratedText


class TextParagraphWidget(_CardModel):
    """ex) { "textParagraph": { "text": "200 - OK" } }"""

    textParagraph: TextParagraph


class ButtonListWidget(_CardModel):
    buttonList: ButtonList


Widget = Union[DecoratedTextWidget, TextParagraphWidget, ButtonListWidget]


class CardHeader(_CardModel):
    title: str
    subtitle: str
    imageUrl: Optional[str] = None


class CardSection(_CardModel):
    widgets: List[Widget]


class Card(_CardModel):
    header: CardHeader
    sections: List[CardSection]


class CardV2(_CardModel):
    cardId: str
    card: Card


class GoogleChatMessage(_CardModel):
    """
    Google Chat incoming webhook 으로 보내는 payload.

    - text: 모바일/데스크톱 알림 미리보기에 뜨는 plain text
    - cardsV2: 실제 채팅방에 렌더링되는 카드
    """

    text: str
    cardsV2: List[CardV2]

    @property
    def card(self) -> Card:
        return self.cardsV2[0].card

    @property
    def widgets(self) -> List[Widget]:
        return self.card.sections[0].widgets

    def to_payload(self) -> Dict[str, Any]:
        """전송용 dict. 값이 없는 optional 필드는 JSON 에서 빠진다."""
        return self.model_dump(exclude_none=True)


def labeled_text(label: str, text: str) -> DecoratedTextWidget:
    return DecoratedTextWidget(decoratedText=DecoratedText(topLabel=label, text=text))


def paragraph(text: str) -> TextParagraphWidget:
    return TextParagraphWidget(textParagraph=TextParagraph(text=text))


def link_button(label: str, url: str) -> ButtonListWidget:
    button = Button(text=label, onClick=OnClick(openLink=OpenLink(url=url)))
    return ButtonListWidget(buttonList=ButtonList(buttons=[button]))
