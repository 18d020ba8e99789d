"""Progress-bar helpers built on tqdm."""

from __future__ import annotations

from typing import Any, Optional

from tqdm import tqdm


class Progress:
    """
    Simple wrapper for tqdm progress bars that automatically closes
    on completion or interruption.
    """

    def __init__(
        self,
        desc: str = "Processing",
        total: Optional[int] = None,
        unit: str = "it",
        disable: bool = False,
    ):
        self._tqdm = tqdm(
            desc=desc,
            total=total,
            unit=unit,
            leave=False,
            dynamic_ncols=True,
            disable=disable,
        )

    def __enter__(self) -> "Progress":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def update(self, n: int = 1) -> None:
        self._tqdm.update(n)

    def close(self) -> None:
        self._tqdm.close()
