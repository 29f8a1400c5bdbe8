from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """Immutable generation settings threaded through every emitter.

    Attributes:
        base_urls: Literal base URLs that generated input templates may start with
        include_absolute_url: Accept any ``http(s)://host`` prefix before the path
        include_server_urls: Prefix paths with each ``servers[].url`` of the document
        include_relative_url: Accept the bare relative path
        experimental_url_search_params: Use the fully typed ``URLSearchParamsString``
            and drop the ``URLSearchParams<T>`` alternative for form bodies
        experimental_discriminator: Literal the ``fetch`` overloads are tagged with
        experimental_require_discriminator: Do not default the discriminator type parameter
    """

    base_urls: tuple[str, ...] = ()
    include_absolute_url: bool = False
    include_server_urls: bool = True
    include_relative_url: bool = False
    experimental_url_search_params: bool = False
    experimental_discriminator: str | None = None
    experimental_require_discriminator: bool = False

    def describe(self) -> str:
        lines = [
            f"  base_urls: {list(self.base_urls)!r}",
            f"  include_absolute_url: {self.include_absolute_url}",
            f"  include_server_urls: {self.include_server_urls}",
            f"  include_relative_url: {self.include_relative_url}",
            f"  experimental_url_search_params: {self.experimental_url_search_params}",
            f"  experimental_discriminator: {self.experimental_discriminator!r}",
            f"  experimental_require_discriminator: {self.experimental_require_discriminator}",
        ]
        return "\n".join(lines)
