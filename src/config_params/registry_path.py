from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["ApplicationInfo", "default_base_path", "sub_key_path"]

ROOT_KEY = "SOFTWARE"
SEPARATOR = "\\"


@dataclass(frozen=True)
class ApplicationInfo:
    company_name: Optional[str] = None
    product_name: Optional[str] = None


def default_base_path(info: ApplicationInfo) -> str:
    """``SOFTWARE\\{company}\\{product}``, skipping blank parts."""
    parts = [p for p in (info.company_name, info.product_name) if p and p.strip()]
    if not parts:
        raise ValueError("company_name and product_name are both blank; cannot infer a base path")
    return SEPARATOR.join([ROOT_KEY, *parts])


def sub_key_path(base_path: str, *sub_keys: Optional[str]) -> str:
    return SEPARATOR.join([base_path, *(k for k in sub_keys if k)])
