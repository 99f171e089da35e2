"""Запись изображений в несжатый 24-битный BMP и чтение их обратно.

Принципы:
- SRP: класс отвечает только за преобразование `Bitmap` <-> файл.
- Формат: BITMAPFILEHEADER (14 байт) + BITMAPINFOHEADER (40 байт), без палитры
  и сжатия; строки снизу вверх, порядок байтов BGR, выравнивание строки до 4 байт.
"""
from __future__ import annotations

import logging
import struct
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from mandelbmp.models.bitmap import Bitmap
from mandelbmp.models.errors import BitmapIOError

logger = logging.getLogger(__name__)

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
BITS_PER_PIXEL = 24
PIXELS_PER_METER = 100


def row_padding(row_bytes: int, alignment: int = 4) -> int:
    """Сколько нулевых байтов нужно дописать, чтобы длина стала кратной `alignment`."""
    return (alignment - row_bytes % alignment) % alignment


class BitmapService:
    def file_header(self, width: int, height: int) -> bytes:
        # size field counts pixel bytes without row padding
        size = PIXEL_DATA_OFFSET + width * height * 3
        return struct.pack("<2sIII", b"BM", size, 0, PIXEL_DATA_OFFSET)

    def info_header(self, width: int, height: int) -> bytes:
        return struct.pack(
            "<IIIHHIIIIII",
            INFO_HEADER_SIZE,
            width,
            height,
            1,  # planes
            BITS_PER_PIXEL,
            0,  # compression
            0,  # image size (0 for no compression)
            PIXELS_PER_METER,
            PIXELS_PER_METER,
            0,  # colors used
            0,  # important colors
        )

    def pixel_data(self, bitmap: Bitmap) -> bytes:
        """Пиксели построчно снизу вверх, в порядке BGR, с выравниванием строк."""
        width, height = bitmap.size()
        if width == 0 or height == 0:
            return b""
        # (width, height, RGB) -> (height, width, BGR), last row first
        rows = bitmap.to_array().transpose(1, 0, 2)[::-1, :, ::-1]
        rows = rows.reshape(height, width * 3)
        pad = row_padding(width * 3)
        if pad:
            rows = np.pad(rows, ((0, 0), (0, pad)), mode="constant", constant_values=0)
        return np.ascontiguousarray(rows, dtype=np.uint8).tobytes()

    def encode(self, bitmap: Bitmap) -> bytes:
        """Полное содержимое BMP-файла для изображения."""
        width, height = bitmap.size()
        data = self.file_header(width, height) + self.info_header(width, height) + self.pixel_data(bitmap)
        logger.debug(f"Encoded {width}x{height} bitmap into {len(data)} bytes")
        return data

    def save_as_bitmap(self, bitmap: Bitmap, file_path: str | Path) -> None:
        """Сохраняет изображение в BMP-файл.

        Raises:
            BitmapIOError: если запись не удалась (права, место на диске, путь).
                Частично записанный файл не удаляется.
        """
        path = Path(file_path)
        data = self.encode(bitmap)
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise BitmapIOError(str(exc)) from exc
        logger.info(f"Saved bitmap to {path} ({len(data)} bytes)")

    def load_bitmap(self, file_path: str | Path) -> Bitmap:
        """Загружает изображение с диска через PIL и возвращает его как `Bitmap`.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as pil_image:
                rgb = np.asarray(pil_image.convert("RGB"), dtype=np.uint8)
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        # PIL: (height, width, 3) -> (width, height, 3)
        return Bitmap(rgb.transpose(1, 0, 2).copy())
