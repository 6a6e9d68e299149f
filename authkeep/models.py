"""Plain data carried between the core and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass
class Email:
    """An e-mail to send.

    The name lists run parallel to their address lists: each must be empty
    or as long as its counterpart. An empty string omits a single name.
    """

    to: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    to_names: list[str] = field(default_factory=list)
    cc_names: list[str] = field(default_factory=list)
    bcc_names: list[str] = field(default_factory=list)
    from_name: str = ""
    from_addr: str = ""
    reply_to_name: str = ""
    reply_to: str = ""
    subject: str = ""
    text_body: str = ""
    html_body: str = ""

    def __post_init__(self) -> None:
        pairs = (
            ("to", self.to, self.to_names),
            ("cc", self.cc, self.cc_names),
            ("bcc", self.bcc, self.bcc_names),
        )
        for label, addresses, names in pairs:
            if names and len(names) != len(addresses):
                raise ValueError(
                    f"{label}_names must be empty or have {len(addresses)} entries, "
                    f"got {len(names)}"
                )


UserDetailsFinder = Callable[[Any, Any], "dict[str, str]"]


@dataclass
class OAuth2Provider:
    """Everything needed to authenticate with one OAuth2 provider.

    ``config`` holds the client configuration; its redirect URL is filled in
    when routes are registered. ``additional_params`` are appended to the
    initial authorisation request. ``find_user_details`` receives the config
    and the token and returns the user's details as a string mapping.
    """

    config: Any = None
    additional_params: dict[str, list[str]] = field(default_factory=dict)
    find_user_details: Optional[UserDetailsFinder] = None