from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import CallbackQuery, Message, TelegramObject

from tgcalendar.core.logger import configure_logger


class UpdateLoggerMiddleware(BaseMiddleware):
    def __init__(self):
        self.logger = configure_logger(prefix="UPDATE_LOG", color="green")

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],   # следующий слой
        event: TelegramObject,                                                # апдейт
        data: Dict[str, Any]                                                  # словарь зависимостей
    ):
        user = getattr(event, "from_user", None)
        user_id = user.id if user is not None else "unknown"

        if isinstance(event, CallbackQuery):
            self.logger.info(f"User {user_id}: callback_data={event.data!r}")
        elif isinstance(event, Message):
            self.logger.info(f"User {user_id}: text={event.text!r}")
        else:
            self.logger.info(f"User {user_id}: {type(event).__name__}")

        return await handler(event, data)              # не забываем пропускать дальше
