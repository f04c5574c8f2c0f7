"""klaw-sampling: randomized selection and ordering over Python iterables.

Fisher-Yates shuffles, single-pass reservoir sampling (Algorithm L), uniform
and weighted random selection. Every operation takes an explicit
`RandomSource`; nothing here owns or seeds a global generator.

Flat imports (preferred):
    from klaw_sampling import shuffle, reservoir_sample, random_element
    from klaw_sampling import weighted_random_element, weighted_random_elements
    from klaw_sampling import Randomizer, StdlibSource

Submodule imports (for organization):
    from klaw_sampling.reservoir import reservoir_sample
    from klaw_sampling.errors import EmptySequenceError, InvalidWeightError
"""

# Configuration
from klaw_sampling._config import SamplingConfig, SourceKind, create_source, get_config, init

# Logging
from klaw_sampling._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Errors
from klaw_sampling.errors import (
    EmptySequence,
    EmptySequenceError,
    InvalidWeight,
    InvalidWeightError,
    SamplingError,
)
from klaw_sampling.randomizer import Randomizer
from klaw_sampling.reservoir import reservoir_sample
from klaw_sampling.result import Err, Ok, Result
from klaw_sampling.selection import random_element, try_random_element
from klaw_sampling.shuffle import shuffle, shuffle_in_place

# Random sources
from klaw_sampling.source import RandomSource, StdlibSource, is_random_access
from klaw_sampling.weighted import (
    try_weighted_random_element,
    weighted_random_element,
    weighted_random_elements,
)

__all__ = [
    # Errors
    'EmptySequence',
    'EmptySequenceError',
    # Result types
    'Err',
    'InvalidWeight',
    'InvalidWeightError',
    'Ok',
    # Random sources
    'RandomSource',
    'Randomizer',
    'Result',
    'SamplingConfig',
    'SamplingError',
    # Configuration
    'SourceKind',
    'StdlibSource',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'create_source',
    'get_config',
    'get_logger',
    'init',
    'is_random_access',
    'random_element',
    'remove_log_hook',
    # Operations
    'reservoir_sample',
    'shuffle',
    'shuffle_in_place',
    'try_random_element',
    'try_weighted_random_element',
    'weighted_random_element',
    'weighted_random_elements',
]
