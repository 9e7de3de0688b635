from __future__ import annotations

import os
from dataclasses import dataclass


_EDGE_ITEMS_ENV = "RINGMATRIX_EDGE_ITEMS"
_PRODUCT_WARN_DIM_ENV = "RINGMATRIX_PRODUCT_WARN_DIM"
_WARN_ON_ABSENT_ENV = "RINGMATRIX_WARN_ON_ABSENT"


@dataclass(frozen=True)
class Config:
    edge_items: int
    product_warn_dimension: int
    warn_on_absent: bool


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    s = raw.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _validated(edge_items: int, product_warn_dimension: int, warn_on_absent: bool) -> Config:
    if edge_items < 1:
        raise ValueError(f"edge_items must be at least 1, got {edge_items}")
    if product_warn_dimension < 0:
        raise ValueError(f"product_warn_dimension must be non-negative, got {product_warn_dimension}")
    return Config(
        edge_items=edge_items,
        product_warn_dimension=product_warn_dimension,
        warn_on_absent=warn_on_absent,
    )


def _from_environment() -> Config:
    try:
        return _validated(
            _env_int(_EDGE_ITEMS_ENV, 4),
            _env_int(_PRODUCT_WARN_DIM_ENV, 256),
            _env_bool(_WARN_ON_ABSENT_ENV, True),
        )
    except ValueError as e:
        raise ValueError(f"invalid ringmatrix environment settings: {e}") from e


_config: Config | None = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = _from_environment()
    return _config


def configure(
    *,
    edge_items: int | None = None,
    product_warn_dimension: int | None = None,
    warn_on_absent: bool | None = None,
) -> Config:
    """Override process-wide settings. Arguments left as None keep their value."""

    global _config
    current = get_config()
    _config = _validated(
        edge_items=current.edge_items if edge_items is None else int(edge_items),
        product_warn_dimension=(
            current.product_warn_dimension
            if product_warn_dimension is None
            else int(product_warn_dimension)
        ),
        warn_on_absent=current.warn_on_absent if warn_on_absent is None else bool(warn_on_absent),
    )
    return _config


def reset_config() -> Config:
    global _config
    _config = _from_environment()
    return _config
