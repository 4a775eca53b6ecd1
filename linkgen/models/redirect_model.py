from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class RedirectModel:
    key: str     # Generated key, the lookup handle of the redirect
    target: str  # Destination URL the key redirects to
# fmt: on
