"""Catálogo de métodos outbound da Bot API.

Cada método é um construtor de requisição de disparo único sobre
``invoke(method, params)``. O parâmetro ``extra`` é mesclado aos parâmetros
obrigatórios (reply_markup, parse_mode, disable_notification, ...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import RemoteInvokerProtocol

    from .input_file import InputFile

ChatId = int | str
Extra = dict[str, Any] | None


class TelegramApi:
    """Métodos de conveniência da Bot API sobre um remote invoker."""

    def __init__(
        self,
        invoker: RemoteInvokerProtocol,
        file_base_url: str = "",
    ) -> None:
        self._invoker = invoker
        self._file_base_url = file_base_url.rstrip("/")

    @property
    def invoker(self) -> RemoteInvokerProtocol:
        return self._invoker

    def bind(self, invoker: RemoteInvokerProtocol) -> TelegramApi:
        """Retorna cópia do catálogo apontando para outro invoker."""
        return TelegramApi(invoker, self._file_base_url)

    async def call(self, method: str, params: dict[str, Any], extra: Extra = None) -> Any:
        return await self._invoker.invoke(method, {**params, **(extra or {})})

    # ── Bot ─────────────────────────────────────────────────────────────────

    async def get_me(self) -> Any:
        return await self.call("getMe", {})

    async def get_file(self, file_id: str) -> Any:
        return await self.call("getFile", {"file_id": file_id})

    async def get_file_link(self, file_id: str) -> str:
        """Retorna link público temporário para download do arquivo."""
        file = await self.get_file(file_id)
        return f"{self._file_base_url}/{file['file_path']}"

    async def set_webhook(self, url: str, certificate: InputFile | None = None) -> Any:
        return await self.call("setWebhook", {"url": url, "certificate": certificate})

    async def remove_webhook(self) -> Any:
        return await self.call("setWebhook", {"url": ""})

    async def get_updates(self, offset: int, limit: int, timeout: int) -> list[dict[str, Any]]:
        result = await self.call(
            "getUpdates", {"offset": offset, "limit": limit, "timeout": timeout}
        )
        return list(result or [])

    async def get_user_profile_photos(
        self,
        user_id: int,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Any:
        return await self.call(
            "getUserProfilePhotos", {"user_id": user_id, "offset": offset, "limit": limit}
        )

    # ── Mensagens ───────────────────────────────────────────────────────────

    async def send_message(self, chat_id: ChatId, text: str, extra: Extra = None) -> Any:
        return await self.call("sendMessage", {"chat_id": chat_id, "text": text}, extra)

    async def forward_message(
        self,
        chat_id: ChatId,
        from_chat_id: ChatId,
        message_id: int,
        extra: Extra = None,
    ) -> Any:
        params = {"chat_id": chat_id, "from_chat_id": from_chat_id, "message_id": message_id}
        return await self.call("forwardMessage", params, extra)

    async def send_chat_action(self, chat_id: ChatId, action: str) -> Any:
        return await self.call("sendChatAction", {"chat_id": chat_id, "action": action})

    async def send_location(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        extra: Extra = None,
    ) -> Any:
        params = {"chat_id": chat_id, "latitude": latitude, "longitude": longitude}
        return await self.call("sendLocation", params, extra)

    async def send_venue(
        self,
        chat_id: ChatId,
        latitude: float,
        longitude: float,
        title: str,
        address: str,
        extra: Extra = None,
    ) -> Any:
        params = {
            "chat_id": chat_id,
            "latitude": latitude,
            "longitude": longitude,
            "title": title,
            "address": address,
        }
        return await self.call("sendVenue", params, extra)

    async def send_contact(
        self,
        chat_id: ChatId,
        phone_number: str,
        first_name: str,
        extra: Extra = None,
    ) -> Any:
        params = {"chat_id": chat_id, "phone_number": phone_number, "first_name": first_name}
        return await self.call("sendContact", params, extra)

    # ── Mídia ───────────────────────────────────────────────────────────────

    async def send_photo(self, chat_id: ChatId, photo: InputFile | str, extra: Extra = None) -> Any:
        return await self.call("sendPhoto", {"chat_id": chat_id, "photo": photo}, extra)

    async def send_document(
        self, chat_id: ChatId, document: InputFile | str, extra: Extra = None
    ) -> Any:
        return await self.call("sendDocument", {"chat_id": chat_id, "document": document}, extra)

    async def send_audio(self, chat_id: ChatId, audio: InputFile | str, extra: Extra = None) -> Any:
        return await self.call("sendAudio", {"chat_id": chat_id, "audio": audio}, extra)

    async def send_sticker(
        self, chat_id: ChatId, sticker: InputFile | str, extra: Extra = None
    ) -> Any:
        return await self.call("sendSticker", {"chat_id": chat_id, "sticker": sticker}, extra)

    async def send_video(self, chat_id: ChatId, video: InputFile | str, extra: Extra = None) -> Any:
        return await self.call("sendVideo", {"chat_id": chat_id, "video": video}, extra)

    async def send_voice(self, chat_id: ChatId, voice: InputFile | str, extra: Extra = None) -> Any:
        return await self.call("sendVoice", {"chat_id": chat_id, "voice": voice}, extra)

    # ── Grupos ──────────────────────────────────────────────────────────────

    async def kick_chat_member(self, chat_id: ChatId, user_id: int) -> Any:
        return await self.call("kickChatMember", {"chat_id": chat_id, "user_id": user_id})

    async def unban_chat_member(self, chat_id: ChatId, user_id: int) -> Any:
        return await self.call("unbanChatMember", {"chat_id": chat_id, "user_id": user_id})

    # ── Queries ─────────────────────────────────────────────────────────────

    async def answer_callback_query(
        self,
        callback_query_id: str,
        text: str | None = None,
        show_alert: bool | None = None,
    ) -> Any:
        params = {"callback_query_id": callback_query_id, "text": text, "show_alert": show_alert}
        return await self.call("answerCallbackQuery", params)

    async def answer_inline_query(
        self,
        inline_query_id: str,
        results: list[dict[str, Any]],
        extra: Extra = None,
    ) -> Any:
        params = {"inline_query_id": inline_query_id, "results": results}
        return await self.call("answerInlineQuery", params, extra)

    # ── Edição ──────────────────────────────────────────────────────────────

    async def edit_message_text(
        self,
        chat_id: ChatId,
        message_id: int,
        text: str,
        extra: Extra = None,
    ) -> Any:
        params = {"chat_id": chat_id, "message_id": message_id, "text": text}
        return await self.call("editMessageText", params, extra)

    async def edit_message_caption(
        self,
        chat_id: ChatId,
        message_id: int,
        caption: str,
        extra: Extra = None,
    ) -> Any:
        params = {"chat_id": chat_id, "message_id": message_id, "caption": caption}
        return await self.call("editMessageCaption", params, extra)

    async def edit_message_reply_markup(
        self,
        chat_id: ChatId,
        message_id: int,
        markup: dict[str, Any],
        extra: Extra = None,
    ) -> Any:
        params = {"chat_id": chat_id, "message_id": message_id, "reply_markup": markup}
        return await self.call("editMessageReplyMarkup", params, extra)
