"""Catálogos fixos da Telegram Bot API usados pelo runtime de despacho.

A ordem das tuplas é contrato: a detecção de tipo e subtipo percorre o
catálogo inteiro e a última chave presente vence.
"""

from __future__ import annotations

from enum import StrEnum


class EventType(StrEnum):
    """Tipos de update (chave de topo do documento recebido)."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    CALLBACK_QUERY = "callback_query"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"


class MessageSubType(StrEnum):
    """Subtipos de conteúdo de uma ``message``."""

    TEXT = "text"
    AUDIO = "audio"
    DOCUMENT = "document"
    PHOTO = "photo"
    STICKER = "sticker"
    VIDEO = "video"
    VOICE = "voice"
    CONTACT = "contact"
    LOCATION = "location"
    VENUE = "venue"
    NEW_CHAT_MEMBER = "new_chat_member"
    LEFT_CHAT_MEMBER = "left_chat_member"
    NEW_CHAT_TITLE = "new_chat_title"
    NEW_CHAT_PHOTO = "new_chat_photo"
    DELETE_CHAT_PHOTO = "delete_chat_photo"
    GROUP_CHAT_CREATED = "group_chat_created"
    SUPERGROUP_CHAT_CREATED = "supergroup_chat_created"
    CHANNEL_CHAT_CREATED = "channel_chat_created"
    MIGRATE_TO_CHAT_ID = "migrate_to_chat_id"
    MIGRATE_FROM_CHAT_ID = "migrate_from_chat_id"
    PINNED_MESSAGE = "pinned_message"


UPDATE_TYPES: tuple[EventType, ...] = tuple(EventType)
MESSAGE_SUBTYPES: tuple[MessageSubType, ...] = tuple(MessageSubType)

# Atalhos do contexto pré-preenchidos com o chat_id (nome no contexto -> método da API)
CHAT_METHODS: tuple[tuple[str, str], ...] = (
    ("reply", "send_message"),
    ("reply_with_photo", "send_photo"),
    ("reply_with_audio", "send_audio"),
    ("reply_with_document", "send_document"),
    ("reply_with_sticker", "send_sticker"),
    ("reply_with_video", "send_video"),
    ("reply_with_voice", "send_voice"),
    ("reply_with_chat_action", "send_chat_action"),
    ("reply_with_location", "send_location"),
    ("reply_with_venue", "send_venue"),
    ("reply_with_contact", "send_contact"),
    ("forward_message", "forward_message"),
    ("kick_chat_member", "kick_chat_member"),
    ("unban_chat_member", "unban_chat_member"),
    ("edit_message_text", "edit_message_text"),
    ("edit_message_caption", "edit_message_caption"),
    ("edit_message_reply_markup", "edit_message_reply_markup"),
)

# Atalhos de resposta pré-preenchidos com o id da query
QUERY_METHODS: dict[EventType, tuple[str, str]] = {
    EventType.CALLBACK_QUERY: ("answer_callback_query", "answer_callback_query"),
    EventType.INLINE_QUERY: ("answer_inline_query", "answer_inline_query"),
}
