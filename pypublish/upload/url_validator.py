"""
Repository URL Validator

Guards the upload destination against server-side request forgery: only
HTTPS is accepted (HTTP for localhost test servers), and every address the
hostname resolves to must be public.
"""

import concurrent.futures
import logging
import socket
from typing import Callable, List, Optional
from urllib.parse import urlparse

from .exceptions import HostnameResolutionError
from .ip_classifier import is_disallowed_ip
from .models import ValidationResult


logger = logging.getLogger(__name__)

Resolver = Callable[[str], List[str]]


def resolve_hostname(host: str) -> List[str]:
    """Resolve a hostname to the unique addresses getaddrinfo reports."""
    try:
        infos = socket.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
    except (OSError, UnicodeError) as e:
        raise HostnameResolutionError(str(e), hostname=host) from e

    addresses = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        address = sockaddr[0]
        if address not in addresses:
            addresses.append(address)
    return addresses


class URLValidator:
    """Validates repository URLs before anything is sent to them"""

    LOCALHOST_NAMES = frozenset({"localhost", "127.0.0.1", "::1"})
    ALLOWED_SCHEMES = ("http", "https")

    def __init__(self, resolver: Optional[Resolver] = None, resolve_timeout: Optional[float] = 10):
        self.resolver = resolver or resolve_hostname
        self.resolve_timeout = resolve_timeout

    def validate(self, raw_url: str) -> ValidationResult:
        """Validate that a repository URL is safe to contact"""
        if not raw_url:
            return self._reject("repository URL cannot be empty", "empty")

        try:
            parsed = urlparse(raw_url)
            host = parsed.hostname or ""
            # Accessing the port surfaces malformed port numbers
            parsed.port
        except ValueError as e:
            return self._reject(f"invalid URL: {e}", "malformed")

        scheme = parsed.scheme.lower()
        # Exact match on the host as written; LOCALHOST is not exempt
        is_localhost = self._written_host(parsed.netloc) in self.LOCALHOST_NAMES

        if scheme not in self.ALLOWED_SCHEMES:
            return self._reject(
                f"only HTTPS URLs are allowed (got {scheme or 'no scheme'})",
                "scheme"
            )

        if scheme == "http" and not is_localhost:
            return self._reject(f"only HTTPS URLs are allowed (got {scheme})", "scheme")

        # Local test servers are intentionally local, skip the private IP check
        if is_localhost:
            return ValidationResult(is_valid=True, field="repository")

        if not host:
            return self._reject("URL must include a hostname", "malformed")

        try:
            addresses = self._resolve(host)
        except concurrent.futures.TimeoutError:
            return self._reject(
                f"hostname resolution timed out after {self.resolve_timeout}s: {host}",
                "resolution"
            )
        except (HostnameResolutionError, OSError, UnicodeError) as e:
            return self._reject(f"failed to resolve hostname: {e}", "resolution")

        if not addresses:
            return self._reject(f"failed to resolve hostname: no addresses for {host}", "resolution")

        logger.debug(f"Resolved {host} to {', '.join(addresses)}")

        for address in addresses:
            if is_disallowed_ip(address):
                logger.warning(f"Repository host {host} resolves to disallowed address {address}")
                return self._reject("URLs pointing to private networks are not allowed", "private_network")

        return ValidationResult(is_valid=True, field="repository")

    def _resolve(self, host: str) -> List[str]:
        """Run the resolver bounded by resolve_timeout"""
        if self.resolve_timeout is None:
            return list(self.resolver(host))

        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.resolver, host)
            return list(future.result(timeout=self.resolve_timeout))
        finally:
            # A lookup stuck in the resolver must not block the caller
            executor.shutdown(wait=False)

    @staticmethod
    def _written_host(netloc: str) -> str:
        """Host part of the netloc as written, case preserved"""
        hostport = netloc.rpartition("@")[2]
        if hostport.startswith("["):
            return hostport[1:].partition("]")[0]
        return hostport.partition(":")[0]

    def _reject(self, message: str, validation_type: str) -> ValidationResult:
        return ValidationResult(
            is_valid=False,
            error_message=message,
            field="repository",
            validation_type=validation_type
        )
