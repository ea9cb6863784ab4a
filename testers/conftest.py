# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры.
Каждый тест получает свежий Config, который смотрит во временный каталог,
так что настройки одного теста не протекают в другой.
"""

import pytest

from simple_math.utils.config import Config


@pytest.fixture(autouse=True)
def config(tmp_path) -> Config:
    """Чистый Config с файлом в tmp_path (файл изначально отсутствует)."""
    Config.reset()
    cfg = Config(str(tmp_path / "simple_math.json"))
    yield cfg
    Config.reset()
