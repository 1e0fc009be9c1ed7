# logic package
from .fraction import InvalidParameter, to_fraction
from .eras import (
    Era,
    Network,
    ProtocolParameter,
    EraProfile,
    ERA_PROFILES,
    find_era,
    coerce_era,
    coerce_network,
    profile_for,
    default_validation_names
)
from .context import (
    UnsupportedEra,
    ValidationContext,
    ContextState,
    build_validation_context,
    context_from_state,
    initial_context_state,
    with_era,
    with_network,
    with_block_slot,
    with_parameter,
    with_parameters,
    to_form_fields,
    form_fields_from_defaults
)
from .params import parse_latest_parameters
from .validations import (
    ValidationResult,
    ValidationReport,
    ValidationVisibilityState,
    summarize
)
from .topics import TopicMeta, get_topic_meta, TX_TOPICS, BLOCK_TOPICS
from .tree import (
    Attribute,
    DiagnosticNode,
    RenderedPanel,
    render,
    iter_panels,
    iter_nodes,
    outline,
    find_attribute
)

__all__ = [
    'InvalidParameter', 'to_fraction',
    'Era', 'Network', 'ProtocolParameter', 'EraProfile', 'ERA_PROFILES',
    'find_era', 'coerce_era', 'coerce_network', 'profile_for',
    'default_validation_names',
    'UnsupportedEra', 'ValidationContext', 'ContextState', 'build_validation_context',
    'context_from_state', 'initial_context_state', 'with_era', 'with_network',
    'with_block_slot', 'with_parameter', 'with_parameters', 'to_form_fields',
    'form_fields_from_defaults',
    'parse_latest_parameters',
    'ValidationResult', 'ValidationReport', 'ValidationVisibilityState', 'summarize',
    'TopicMeta', 'get_topic_meta', 'TX_TOPICS', 'BLOCK_TOPICS',
    'Attribute', 'DiagnosticNode', 'RenderedPanel', 'render', 'iter_panels',
    'iter_nodes', 'outline', 'find_attribute'
]
