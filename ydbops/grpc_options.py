"""Connection options for the cluster's gRPC endpoint."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

GRPC_DEFAULT_TIMEOUT_SECONDS = 60
GRPC_DEFAULT_PORT = 2135
_MAX_PORT = 65536


class OptionsError(ValueError):
    """Raised when command-line options are invalid."""


def _split_host_port(netloc: str) -> tuple[str, str]:
    host_port = netloc.rpartition("@")[2]
    if host_port.startswith("["):
        end = host_port.find("]")
        if end < 0:
            raise OptionsError("failed to parse --endpoint: missing ']' in host")
        rest = host_port[end + 1:]
        if rest and not rest.startswith(":"):
            raise OptionsError("failed to parse --endpoint: invalid port")
        return host_port[1:end], rest[1:]
    if ":" in host_port:
        host, _, port = host_port.rpartition(":")
        return host, port
    return host_port, ""


@dataclass
class GrpcOptions:
    """Where and how to reach the cluster."""

    endpoint: str = ""
    ca_file: str = ""
    secure: bool = False
    port: int = 0
    skip_verify: bool = False
    timeout_seconds: int = GRPC_DEFAULT_TIMEOUT_SECONDS

    def validate(self) -> None:
        """Check the options and normalise endpoint, port and security."""
        if self.ca_file:
            if "grpcs" not in self.endpoint:
                raise OptionsError("--ca-file must be specified only for secure connection")
            if self.ca_file.startswith("~/"):
                self.ca_file = str(Path.home() / self.ca_file[2:])
            if not os.path.exists(self.ca_file):
                raise OptionsError(f"--ca-file file not found: {self.ca_file}")

        if self.timeout_seconds < 0:
            raise OptionsError(f"invalid grpc timeout value specified: {self.timeout_seconds}")

        if not self.endpoint:
            return

        try:
            parsed = urlsplit(self.endpoint)
        except ValueError as exc:
            raise OptionsError(f"failed to parse --endpoint: {exc}") from exc

        if parsed.scheme == "grpcs":
            self.secure = True
        elif parsed.scheme == "grpc":
            self.secure = False
        else:
            raise OptionsError(
                "please specify the protocol in the endpoint explicitly: grpc or grpcs"
            )

        if not self.secure and self.skip_verify:
            raise OptionsError("unexpected --grpc-skip-verify with insecure grpc schema")

        host, port_text = _split_host_port(parsed.netloc)
        if port_text and not port_text.isdigit():
            raise OptionsError(f"failed to parse --endpoint: invalid port {port_text!r}")

        self.endpoint = host
        if not port_text:
            self.port = GRPC_DEFAULT_PORT
            return
        port = int(port_text)
        if port > _MAX_PORT:
            raise OptionsError(
                f"invalid port specified: {port}, must be in range: (1,{_MAX_PORT})"
            )
        self.port = port