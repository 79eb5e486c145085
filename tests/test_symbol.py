import json

import pytest
from pydantic import ValidationError

from hsdemangle.error import DemangleError
from hsdemangle.symbol import DemangledSymbol, demangle_symbol, split_components


@pytest.mark.parametrize(
    "mangled,components",
    [
        ("base_GHCziBase_zpzp_info", ["base", "GHC.Base", "++", "info"]),
        (
            "ghczmprim_GHCziTypes_ZC_con_info",
            ["ghc-prim", "GHC.Types", ":", "con", "info"],
        ),
        ("main_Main_myzuvar_closure", ["main", "Main", "my_var", "closure"]),
        ("Main", ["Main"]),
        ("", [""]),
    ],
)
def test_split_components(mangled: str, components: list):
    assert split_components(mangled) == components


def test_demangle_symbol():
    symbol = demangle_symbol("base_GHCziBase_zpzp_info")

    assert symbol.mangled == "base_GHCziBase_zpzp_info"
    assert symbol.demangled == "base_GHC.Base_++_info"
    assert symbol.components == ["base", "GHC.Base", "++", "info"]


def test_demangle_symbol__json():
    symbol = demangle_symbol("ghczmprim_GHCziTuple_Z3T_con_info")

    assert json.loads(symbol.model_dump_json()) == {
        "mangled": "ghczmprim_GHCziTuple_Z3T_con_info",
        "demangled": "ghc-prim_GHC.Tuple_(,,)_con_info",
        "components": ["ghc-prim", "GHC.Tuple", "(,,)", "con", "info"],
    }


def test_demangle_symbol__is_frozen():
    symbol = demangle_symbol("Main")
    with pytest.raises(ValidationError):
        symbol.demangled = "other"


def test_demangle_symbol__malformed_component():
    with pytest.raises(DemangleError):
        demangle_symbol("base_Z1T_info")


def test_demangled_symbol__validates_fields():
    with pytest.raises(ValidationError):
        DemangledSymbol(mangled="x", demangled="x", components="x")
