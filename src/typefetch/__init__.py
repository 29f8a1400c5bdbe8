__version__ = "0.1.0"

from .errors import (  # noqa: E402
    ConfigurationError,
    ReferenceCycleError,
    ResolutionError,
    SpecError,
    StatusCodeError,
    TypefetchError,
)
from .generation import (  # noqa: E402
    Diagnostic,
    Scope,
    TypeEmitter,
    add_components,
    add_paths,
    to_schema_type,
)
from .generator import DefinitionsOutput, generate_source, write_definitions  # noqa: E402
from .ir import IRDocument, build_ir, merge_parameters  # noqa: E402
from .loader import load_openapi  # noqa: E402
from .options import Options  # noqa: E402
from .resolver import resolve, resolve_object  # noqa: E402
from .status import STATUS_CODES, expand_status_codes  # noqa: E402

__all__ = [
    "__version__",
    "TypefetchError",
    "SpecError",
    "ResolutionError",
    "ReferenceCycleError",
    "StatusCodeError",
    "ConfigurationError",
    "Diagnostic",
    "Scope",
    "TypeEmitter",
    "add_components",
    "add_paths",
    "to_schema_type",
    "DefinitionsOutput",
    "generate_source",
    "write_definitions",
    "IRDocument",
    "build_ir",
    "merge_parameters",
    "load_openapi",
    "Options",
    "resolve",
    "resolve_object",
    "STATUS_CODES",
    "expand_status_codes",
]
