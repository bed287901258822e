"""Word filters for converting between camelCase, StudlyCase and separated words.

Components:
    - Separator / SeparatorPair: Immutable separator configuration
    - TextBoundaryPolicy: Unicode or ASCII character-class regime
    - CaseSplitter: camelCase -> separated words
    - SeparatorRecombiner: separated words -> StudlyCase
    - StudlyCaseAdapter: separated words -> camelCase
    - SeparatorSubstitution: literal separator replacement
    - map_value: string / scalar / sequence dispatch shared by all filters

Example:
    from wordfilter import create_filter, camel_case_to_underscore

    camel_case_to_underscore()('HTTPServerError')   # 'HTTP_Server_Error'
    create_filter('DashToCamelCase')(['a-b', None])  # ['AB', None]
"""

from wordfilter.separator import (
    DEFAULT_SEPARATOR,
    WordFilterError,
    ConfigurationError,
    Separator,
    SeparatorPair,
)

from wordfilter.boundary import (
    BoundaryPolicyError,
    TextBoundaryPolicy,
    UnicodeBoundaryPolicy,
    AsciiBoundaryPolicy,
    create_boundary_policy,
    get_default_policy,
)

from wordfilter.values import (
    InputKind,
    classify,
    map_value,
)

from wordfilter.transforms import (
    WordFilter,
    CaseSplitter,
    SeparatorRecombiner,
    StudlyCaseAdapter,
    SeparatorSubstitution,
    split,
    recombine,
    to_studly,
    substitute,
)

from wordfilter.presets import (
    UnknownFilterError,
    available_filters,
    create_filter,
    camel_case_to_separator,
    camel_case_to_dash,
    camel_case_to_underscore,
    separator_to_camel_case,
    dash_to_camel_case,
    underscore_to_camel_case,
    underscore_to_studly_case,
    dash_to_studly_case,
    separator_to_separator,
    separator_to_dash,
    dash_to_separator,
    dash_to_underscore,
    underscore_to_dash,
    underscore_to_separator,
)


__all__ = [
    # Separators
    'DEFAULT_SEPARATOR',
    'WordFilterError',
    'ConfigurationError',
    'Separator',
    'SeparatorPair',
    # Boundary policy
    'BoundaryPolicyError',
    'TextBoundaryPolicy',
    'UnicodeBoundaryPolicy',
    'AsciiBoundaryPolicy',
    'create_boundary_policy',
    'get_default_policy',
    # Dispatch
    'InputKind',
    'classify',
    'map_value',
    # Filters
    'WordFilter',
    'CaseSplitter',
    'SeparatorRecombiner',
    'StudlyCaseAdapter',
    'SeparatorSubstitution',
    'split',
    'recombine',
    'to_studly',
    'substitute',
    # Presets
    'UnknownFilterError',
    'available_filters',
    'create_filter',
    'camel_case_to_separator',
    'camel_case_to_dash',
    'camel_case_to_underscore',
    'separator_to_camel_case',
    'dash_to_camel_case',
    'underscore_to_camel_case',
    'underscore_to_studly_case',
    'dash_to_studly_case',
    'separator_to_separator',
    'separator_to_dash',
    'dash_to_separator',
    'dash_to_underscore',
    'underscore_to_dash',
    'underscore_to_separator',
]
