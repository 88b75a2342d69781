"""Platform-specific addenda appended after the protocol preamble.

A PlatformRegistry maps a token to a fragment of instruction text. A host
identifier (typically a domain name) selects every fragment whose token it
contains, compared case-sensitively, in registration order. Several
platforms can match the same host; an unknown host selects nothing.

Example:
    >>> registry = PlatformRegistry()
    >>> registry.register("perplexity", "## Perplexity\\n\\nKeep replies short.\\n\\n")
    >>> registry.select("www.perplexity.ai")
    ['## Perplexity\\n\\nKeep replies short.\\n\\n']
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from instructgen.foundation.errors import ErrorCode, InstructgenError

GEMINI_INSTRUCTIONS = """## Platform Notes: Gemini

*   Write the function call as plain text inside the `xml` codeblock; do not use native tool calling.
*   Do not wrap the `xml` codeblock in any other markup or quote block.
*   Stop your response right after the closing `</function_calls>` tag and wait for the result.

"""

CHATGPT_INSTRUCTIONS = """## Platform Notes: ChatGPT

*   Do not use the built-in browsing, canvas or code interpreter features to call these functions.
*   Emit the `xml` codeblock exactly once per turn, as the last part of your message.
*   Wait for the function result before continuing the conversation.

"""

DEFAULT_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("gemini", GEMINI_INSTRUCTIONS),
    ("chatgpt", CHATGPT_INSTRUCTIONS),
)


class PlatformRegistry:
    """Ordered token -> fragment mapping used to pick platform addenda."""

    __slots__ = ("_fragments",)

    def __init__(self, platforms: Iterable[tuple[str, str]] = ()) -> None:
        self._fragments: dict[str, str] = {}
        for token, fragment in platforms:
            self.register(token, fragment)

    @classmethod
    def default(cls) -> PlatformRegistry:
        """Registry preloaded with the built-in platforms (gemini, then chatgpt)."""
        return cls(DEFAULT_PLATFORMS)

    def register(self, token: str, fragment: str) -> None:
        """Add a platform. Fragments are checked in the order they were registered.

        Raises:
            InstructgenError: If the token is empty or already registered
        """
        if not token:
            raise InstructgenError("Platform token must not be empty", code=ErrorCode.INVALID_PLATFORM)
        if token in self._fragments:
            raise InstructgenError(f"Platform '{token}' already registered. Use unregister() first.",
                                   code=ErrorCode.INVALID_PLATFORM)
        self._fragments[token] = fragment

    def unregister(self, token: str) -> bool:
        """Remove a platform by token. Returns True if found."""
        return self._fragments.pop(token, None) is not None

    def select(self, host: str) -> list[str]:
        """Fragments whose token occurs in host, in registration order."""
        return [fragment for token, fragment in self._fragments.items() if token in host]

    def __getitem__(self, token: str) -> str:
        return self._fragments[token]

    def __contains__(self, token: object) -> bool:
        return token in self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    def __repr__(self) -> str:
        return f"PlatformRegistry({list(self._fragments)!r})"
