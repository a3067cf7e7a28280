"""Decorator and adapter patterns: layered documents, sockets and call tracing."""

from __future__ import annotations

import functools
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, TextIO


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


class Document(ABC):
    """Something that can be saved to a text stream."""

    @abstractmethod
    def save(self, out: TextIO) -> None:
        """Write this document to ``out``."""


class PdfDocument(Document):
    def save(self, out: TextIO) -> None:
        out.write("Saving Pdf...\n")


class DocDocument(Document):
    def save(self, out: TextIO) -> None:
        out.write("Saving Doc...\n")


class DocumentDecorator(Document, ABC):
    """A document that wraps another and adds behaviour around its save."""

    def __init__(self, decorated: Document) -> None:
        self._decorated = decorated

    @property
    def decorated(self) -> Document:
        return self._decorated


class CompressedDocument(DocumentDecorator):
    """Saves the wrapped document through a compression stream."""

    def __init__(self, decorated: Document, compression: str) -> None:
        super().__init__(decorated)
        self.compression = compression

    def save(self, out: TextIO) -> None:
        out.write(f"Creating '{self.compression}' compression output stream...\n")
        self.decorated.save(out)


class EncryptedDocument(DocumentDecorator):
    """Saves the wrapped document through an encryption stream."""

    def __init__(self, decorated: Document, encryption: str) -> None:
        super().__init__(decorated)
        self.encryption = encryption

    def save(self, out: TextIO) -> None:
        out.write(f"Creating '{self.encryption}' encryption output stream...\n")
        self.decorated.save(out)


class Socket(ABC):
    """A transport that reports the traffic it carries."""

    @abstractmethod
    def send(self, data: Any, size: int) -> None:
        """Send ``size`` bytes of ``data``."""

    @abstractmethod
    def recv(self, data: Any, size: int) -> None:
        """Receive ``size`` bytes into ``data``."""


class _NetworkSocket(Socket):
    _protocol = ""

    def __init__(self, address: str, port: int, out: Optional[TextIO] = None) -> None:
        self.address = address
        self.port = port
        self._out = out

    def send(self, data: Any, size: int) -> None:
        _stream(self._out).write(
            f"Sending {size} bytes over {self._protocol} to {self.address}:{self.port}\n"
        )

    def recv(self, data: Any, size: int) -> None:
        _stream(self._out).write(
            f"Receiving {size} bytes over {self._protocol} from {self.address}:{self.port}\n"
        )


class TcpSocket(_NetworkSocket):
    _protocol = "TCP"

    def __init__(self, address: str, port: int, out: Optional[TextIO] = None) -> None:
        super().__init__(address, port, out)

    def send(self, data: Any, size: int) -> None:
        super().send(data, size)

    def recv(self, data: Any, size: int) -> None:
        super().recv(data, size)


class UdpSocket(_NetworkSocket):
    _protocol = "UDP"

    def __init__(self, address: str, port: int, out: Optional[TextIO] = None) -> None:
        super().__init__(address, port, out)

    def send(self, data: Any, size: int) -> None:
        super().send(data, size)

    def recv(self, data: Any, size: int) -> None:
        super().recv(data, size)


class SocketDecorator(Socket, ABC):
    """A socket that wraps another and adds behaviour around its traffic."""

    def __init__(self, decorated: Socket, out: Optional[TextIO] = None) -> None:
        self._decorated = decorated
        self._out = out

    @property
    def decorated(self) -> Socket:
        return self._decorated

    def _write(self, text: str) -> None:
        _stream(self._out).write(text + "\n")


class CompressedSocket(SocketDecorator):
    """Halves outgoing traffic by compressing it; decompresses incoming data."""

    def __init__(
        self, decorated: Socket, compression: str, out: Optional[TextIO] = None
    ) -> None:
        super().__init__(decorated, out)
        self.compression = compression

    def send(self, data: Any, size: int) -> None:
        self._write(f"Compressing {size} bytes using '{self.compression}'...")
        self.decorated.send(data, size // 2)

    def recv(self, data: Any, size: int) -> None:
        self.decorated.recv(data, size)
        self._write(f"Decompressing {size} bytes using '{self.compression}'...")


class EncryptedSocket(SocketDecorator):
    """Encrypts outgoing traffic and decrypts incoming data."""

    def __init__(
        self, decorated: Socket, encryption: str, out: Optional[TextIO] = None
    ) -> None:
        super().__init__(decorated, out)
        self.encryption = encryption

    def send(self, data: Any, size: int) -> None:
        self._write(f"Encrypting {size} bytes using '{self.encryption}'...")
        self.decorated.send(data, size)

    def recv(self, data: Any, size: int) -> None:
        self.decorated.recv(data, size)
        self._write(f"Decrypting {size} bytes using '{self.encryption}'...")


class Adapter:
    """Exposes ``method1`` by forwarding to an object that offers ``method2``."""

    def __init__(self, adaptee: Any) -> None:
        self._adaptee = adaptee

    def method1(self) -> Any:
        return self._adaptee.method2()


def debug_decorator(
    func: Callable[..., Any], message: str, out: Optional[TextIO] = None
) -> Callable[..., Any]:
    """Wrap ``func`` so each call first reports ``message``."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _stream(out).write(f"Invoking: {message}\n")
        return func(*args, **kwargs)

    return wrapper