from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from hsdemangle.decoder import demangle

COMPONENT_SEPARATOR = "_"


class DemangledSymbol(BaseModel):
    """
    A decoded object-code symbol such as `base_GHCziBase_zpzp_info`.

    GHC joins the Z-encoded package, module, name and suffix with `_`; an
    underscore inside a name is itself encoded as `zu`, so splitting the
    mangled form on `_` recovers the components.
    """

    model_config = ConfigDict(frozen=True)

    mangled: str
    demangled: str
    components: List[str]


def split_components(mangled: str) -> List[str]:
    return [demangle(part) for part in mangled.split(COMPONENT_SEPARATOR)]


def demangle_symbol(mangled: str) -> DemangledSymbol:
    components = split_components(mangled)
    return DemangledSymbol(
        mangled=mangled,
        demangled=COMPONENT_SEPARATOR.join(components),
        components=components,
    )
