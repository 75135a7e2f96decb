"""PersistenceGateway — порт key-value хранилища строк.

Ядро калькулятора требует от хранилища только две операции:
- load(key) -> str | None
- save(key, value) -> None (best-effort)

Валидация значений выполняется в ядре (PriceStore), а не в хранилище.
Конкретное хранилище устройства подставляется снаружи; здесь — адаптеры
для памяти (тесты, встраивание) и для JSON-файла.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class PersistenceGateway(Protocol):
    """Порт key-value хранилища строковых значений."""

    def load(self, key: str) -> Optional[str]:
        """Ранее сохранённый текст или None."""
        ...

    def save(self, key: str, value: str) -> None:
        """Сохранение текста (может бросить исключение при сбое записи)."""
        ...


class InMemoryGateway:
    """Хранилище в памяти процесса."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> Dict[str, str]:
        """Копия всех сохранённых значений."""
        return dict(self._data)


class JsonFileGateway:
    """Хранилище в одном JSON-файле {key: value}.

    Запись атомарна: сначала во временный файл, затем os.replace.
    Повреждённый файл читается как пустое хранилище; перед следующей
    записью он переносится в <имя>.corrupt, а не перезаписывается.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def corrupt_path(self) -> Path:
        return self._path.with_suffix(self._path.suffix + ".corrupt")

    def _read_all(self) -> Optional[Dict[str, str]]:
        """Содержимое файла; None если файл есть, но не читается."""
        if not self._path.exists():
            return {}

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Storage file %s unreadable: %s", self._path, exc)
            return None

        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object", self._path)
            return None

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def load(self, key: str) -> Optional[str]:
        return (self._read_all() or {}).get(key)

    def save(self, key: str, value: str) -> None:
        data = self._read_all()
        if data is None:
            os.replace(self._path, self.corrupt_path)
            logger.warning(
                "Unreadable storage file moved to %s before write", self.corrupt_path
            )
            data = {}
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self._path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
