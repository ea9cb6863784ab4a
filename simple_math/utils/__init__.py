# simple_math/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – готовый объект logging.Logger (с level INFO)
    * Config – JSON‑конфигурация (epsilon, режим flat‑конструктора матрицы)
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "Config", "DEFAULT_CONFIG"]
