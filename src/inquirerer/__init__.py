from inquirerer.config.settings import PrompterConfig, load_config
from inquirerer.engine.errors import (
    ConfigurationError,
    CyclicDependencyError,
    DuplicateQuestionError,
    EmptyOptionsError,
    MissingRequiredArgumentsError,
    PromptAbortedError,
    PrompterError,
    QuestionFileError,
    UnknownDependencyError,
    ValidationFailedError,
)
from inquirerer.prompter import Prompter
from inquirerer.terminal.keypress import KeyCode, KeyDispatcher
from inquirerer.usage.man_page import ManPageInfo, render_man_page

__all__ = [
    "ConfigurationError",
    "CyclicDependencyError",
    "DuplicateQuestionError",
    "EmptyOptionsError",
    "KeyCode",
    "KeyDispatcher",
    "ManPageInfo",
    "MissingRequiredArgumentsError",
    "PromptAbortedError",
    "Prompter",
    "PrompterConfig",
    "PrompterError",
    "QuestionFileError",
    "UnknownDependencyError",
    "ValidationFailedError",
    "load_config",
    "render_man_page",
]
