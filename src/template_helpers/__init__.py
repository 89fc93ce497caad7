"""Helper functions for Jinja2 templates.

```python
from template_helpers import render_template

render_template('{{ to_upper_case(to_singular("Hello foo-bars")) }}')  # "BAR"
```
"""

from template_helpers.capabilities import Capabilities
from template_helpers.config import HelperGroup, HelperSettings
from template_helpers.core import (
    DataFormat,
    HelperRegistry,
    HelperSignature,
    ParamKind,
    ParamSpec,
    PathExpression,
    RegisteredHelper,
    decode,
    encode,
    evaluate,
    quote,
    to_template_string,
    unquote,
    validate,
)
from template_helpers.errors import (
    DecodeFailure,
    HelperError,
    HelperIOError,
    MissingParameter,
    PathNotFound,
    RegistryFrozenError,
    TypeMismatch,
    UnexpectedParameter,
    UnknownHelperError,
)
from template_helpers.templating import (
    build_registry,
    create_environment,
    get_default_environment,
    get_default_registry,
    render_template,
    setup_environment,
)

__all__ = [
    # Setup and rendering
    "create_environment",
    "setup_environment",
    "build_registry",
    "get_default_registry",
    "get_default_environment",
    "render_template",
    "HelperSettings",
    "HelperGroup",
    "Capabilities",
    # Registry and signatures
    "HelperRegistry",
    "RegisteredHelper",
    "HelperSignature",
    "ParamSpec",
    "ParamKind",
    "validate",
    # Data query
    "DataFormat",
    "decode",
    "encode",
    "PathExpression",
    "evaluate",
    "to_template_string",
    "quote",
    "unquote",
    # Errors
    "HelperError",
    "MissingParameter",
    "TypeMismatch",
    "UnexpectedParameter",
    "DecodeFailure",
    "PathNotFound",
    "HelperIOError",
    "RegistryFrozenError",
    "UnknownHelperError",
]
