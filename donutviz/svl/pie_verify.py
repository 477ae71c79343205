# donutviz/svl/pie_verify.py
from typing import Any, List, Mapping

from pydantic import ValidationError

from donutviz.core.errors import ConfigurationError
from .pie_spec import PieSpec

MAX_SLICES = 360

def _messages(err: ValidationError) -> List[str]:
    out = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()))
        msg = e.get("msg", "invalid")
        out.append(f"{loc}: {msg}" if loc else msg)
    return out

def verify_pie(raw: Mapping[str, Any]) -> PieSpec:
    """
    Validate a proposed PieSpec dict (lists or ';'-joined attribute strings).
    - schema checks via PieSpec
    - caps the slice count so a single chart stays drawable
    Raises ConfigurationError listing every problem found.
    """
    if isinstance(raw, PieSpec):
        spec = raw
    else:
        try:
            spec = PieSpec(**raw)
        except ValidationError as e:
            errs = _messages(e)
            raise ConfigurationError("; ".join(errs), errs) from e
        except TypeError as e:
            raise ConfigurationError(f"bad pie spec: {e}") from e

    if len(spec.values) > MAX_SLICES:
        raise ConfigurationError(f"values: too many slices; cap at {MAX_SLICES}.")
    return spec
