from __future__ import annotations


class RecordingSend:
    """ASGI send collecting every message it receives."""

    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def __call__(self, message: dict) -> None:
        self.messages.append(message)


class FixedPager:
    """Pager returning the same page for every call and remembering its inputs."""

    def __init__(self, page: bytes | None = b"<html>custom</html>") -> None:
        self.page = page
        self.calls: list[tuple[bytes, int]] = []

    def get_error_page(self, data: bytes, status: int) -> bytes | None:
        self.calls.append((data, status))
        return self.page


class CountingPager:
    """Pager whose page changes with every call."""

    def __init__(self) -> None:
        self.count = 0

    def get_error_page(self, data: bytes, status: int) -> bytes | None:
        self.count += 1
        return f"<p>{self.count}:{status}:{data.decode()}</p>".encode()


class ExplodingPager:
    def get_error_page(self, data: bytes, status: int) -> bytes | None:
        raise RuntimeError("pager exploded")
