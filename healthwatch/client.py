"""Network clients: HTTP sessions, TCP, STARTTLS and ICMP checks."""

from __future__ import annotations

import dataclasses
import os
import smtplib
import socket
import ssl
import struct
import time
from dataclasses import dataclass, field

import requests
from requests.adapters import HTTPAdapter

DEFAULT_HTTP_TIMEOUT = 10.0

_PING_PAYLOAD = b"healthwatch-icmp-echo-payload!!!"


class _ClientSession(requests.Session):
    """Session applying a default timeout and an optional redirect block."""

    def __init__(self, timeout: float, follow_redirects: bool, verify: bool) -> None:
        super().__init__()
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify = verify
        adapter = HTTPAdapter(pool_connections=100, pool_maxsize=20)
        self.mount("http://", adapter)
        self.mount("https://", adapter)

    def request(self, method, url, *args, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, *args, **kwargs)

    def get_redirect_target(self, resp):
        if not self.follow_redirects:
            return None
        return super().get_redirect_target(resp)


@dataclass
class ClientConfig:
    """Configuration for clients; ``timeout`` is in seconds."""

    insecure: bool = False
    ignore_redirect: bool = False
    timeout: float = DEFAULT_HTTP_TIMEOUT
    _session: _ClientSession | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def validate_and_set_defaults(self) -> None:
        """Replace a timeout below one millisecond with the default."""
        if self.timeout < 0.001:
            self.timeout = DEFAULT_HTTP_TIMEOUT

    def http_session(self) -> requests.Session:
        """Return the HTTP session matching this configuration, created once."""
        if self._session is None:
            self._session = _ClientSession(
                timeout=self.timeout,
                follow_redirects=not self.ignore_redirect,
                verify=not self.insecure,
            )
        return self._session


_DEFAULT_CONFIG = ClientConfig()


def default_config() -> ClientConfig:
    """Return a copy of the default client configuration."""
    return dataclasses.replace(_DEFAULT_CONFIG)


def get_http_session(config: ClientConfig | None = None) -> requests.Session:
    """Return the session for ``config``, or the shared default session."""
    return (config or _DEFAULT_CONFIG).http_session()


def _split_host_port(address: str) -> tuple[str, int] | None:
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit():
        return None
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


def can_create_tcp_connection(address: str, config: ClientConfig | None = None) -> bool:
    """Return whether a TCP connection to ``host:port`` can be established."""
    config = config or _DEFAULT_CONFIG
    target = _split_host_port(address)
    if target is None:
        return False
    try:
        conn = socket.create_connection(target, timeout=config.timeout)
    except (OSError, OverflowError):
        return False
    conn.close()
    return True


def can_perform_starttls(
    address: str, config: ClientConfig | None = None
) -> tuple[bool, bytes]:
    """Connect to an SMTP server and upgrade with STARTTLS.

    Returns ``(True, certificate)`` with the peer certificate in DER form.
    Raises ``ValueError`` for a malformed address and ``OSError`` or
    ``smtplib.SMTPException`` when the connection or upgrade fails.
    """
    config = config or _DEFAULT_CONFIG
    parts = address.split(":")
    if len(parts) != 2:
        raise ValueError("invalid address for starttls, format must be host:port")
    host, port = parts
    if not port.isdigit():
        raise ValueError(f"invalid port for starttls: {port!r}")
    context = ssl.create_default_context()
    if config.insecure:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    smtp = smtplib.SMTP(host, int(port), timeout=config.timeout)
    try:
        smtp.starttls(context=context)
        sock = smtp.sock
        certificate = sock.getpeercert(binary_form=True) if sock is not None else None
        if not certificate:
            raise ConnectionError("could not get TLS connection state")
        return True, certificate
    finally:
        smtp.close()


def _checksum(data: bytes) -> int:
    if len(data) % 2:
        data += b"\x00"
    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return ~total & 0xFFFF


def _open_icmp_socket(family: int) -> tuple[socket.socket, bool]:
    proto = socket.IPPROTO_ICMP if family == socket.AF_INET else socket.IPPROTO_ICMPV6
    try:
        return socket.socket(family, socket.SOCK_DGRAM, proto), False
    except OSError:
        return socket.socket(family, socket.SOCK_RAW, proto), True


def ping(address: str, config: ClientConfig | None = None) -> tuple[bool, float]:
    """Send one ICMP echo request.

    Returns ``(True, rtt)`` on a reply, ``(False, timeout)`` when no reply
    arrives in time, and ``(False, 0.0)`` when the ping cannot be sent.
    """
    config = config or _DEFAULT_CONFIG
    try:
        family, _, _, _, sockaddr = socket.getaddrinfo(address, None)[0]
    except (OSError, UnicodeError):
        return False, 0.0
    if family not in (socket.AF_INET, socket.AF_INET6):
        return False, 0.0
    try:
        sock, raw = _open_icmp_socket(family)
    except OSError:
        return False, 0.0

    is_v4 = family == socket.AF_INET
    request_type, reply_type = (8, 0) if is_v4 else (128, 129)
    identifier = os.getpid() & 0xFFFF
    sequence = 1
    header = struct.pack("!BBHHH", request_type, 0, 0, identifier, sequence)
    checksum = _checksum(header + _PING_PAYLOAD) if is_v4 else 0
    packet = struct.pack("!BBHHH", request_type, 0, checksum, identifier, sequence) + _PING_PAYLOAD

    with sock:
        start = time.monotonic()
        deadline = start + config.timeout
        try:
            sock.sendto(packet, sockaddr)
        except OSError:
            return False, 0.0
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False, config.timeout
            sock.settimeout(remaining)
            try:
                data = sock.recv(65535)
            except socket.timeout:
                return False, config.timeout
            except OSError:
                return False, 0.0
            if raw and is_v4 and data:
                data = data[(data[0] & 0x0F) * 4:]
            if len(data) < 8:
                continue
            kind, _, _, reply_id, reply_seq = struct.unpack("!BBHHH", data[:8])
            if kind == reply_type and reply_seq == sequence and (not raw or reply_id == identifier):
                return True, time.monotonic() - start