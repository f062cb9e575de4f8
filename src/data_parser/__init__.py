"""
data_parser - validated console prompts

Read a line, parse it into a typed value, re-prompt on bad input. Typing
"exit" at any prompt raises UserCancelled.
"""
from data_parser.config.config_parser import VERSION as __version__
from data_parser.config.logging_config import setup_logging
from data_parser.utils.exceptions import EndOfInput, PromptTimedOut, UserCancelled
from data_parser.utils.parsers import (
    is_valid_email,
    parse_double,
    parse_email,
    parse_flexible_date,
    parse_integer,
    parse_non_empty_string,
)
from data_parser.utils.results import PromptResult, PromptStatus, try_prompt
from data_parser.utils.timed_input import prompt_for_string_with_timeout
from data_parser.utils.user_input import (
    prompt_for,
    prompt_for_double,
    prompt_for_email,
    prompt_for_flexible_date,
    prompt_for_flexible_date_or_default,
    prompt_for_integer,
    prompt_for_non_empty_string,
    read_line_safe,
)
