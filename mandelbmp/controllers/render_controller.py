"""Контроллер рендера: проверка параметров, вызов сервисов, вывод результата.

SOLID:
- SRP: класс связывает CLI с сервисами и отвечает только за сообщения пользователю.
- DIP: сервис записи передаётся полем и подменяется в тестах.
Clean Code:
- Ошибки сервисов не обрабатываются локально, контроллер лишь превращает их в строку.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from mandelbmp.models.errors import BitmapIOError
from mandelbmp.models.render_config import RenderConfig
from mandelbmp.services.bitmap_service import BitmapService
from mandelbmp.services.mandelbrot_service import render

logger = logging.getLogger(__name__)


@dataclass
class RenderController:
    """Выполняет один рендер по `RenderConfig`.

    Ответственности:
    - Проверка границ и радиуса до построения изображения.
    - Запуск `render` и запись файла через `BitmapService`.
    - Печать итогового сообщения (`output`, по умолчанию `print`).
    """
    bitmap_service: BitmapService = field(default_factory=BitmapService)
    output: Callable[[str], None] = print

    def run(self, config: RenderConfig) -> bool:
        """Возвращает True, если файл записан."""
        problem = config.validate()
        if problem is not None:
            self.output(problem)
            return False

        try:
            render(
                config.x1,
                config.y1,
                config.x2,
                config.y2,
                config.pixel_size,
                config.bound,
                config.max_iter,
                config.path,
                bitmap_service=self.bitmap_service,
            )
        except BitmapIOError as exc:
            logger.debug(f"Saving to {config.path} failed", exc_info=True)
            self.output(f"Error occurred during saving to file: {exc}")
            return False

        self.output("Plot generated")
        return True
