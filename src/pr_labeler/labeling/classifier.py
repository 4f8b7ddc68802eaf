"""
Path Classifier

Maps a single changed file to at most one label using an ordered
list of path rules. The first rule that matches wins.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..models.labels import Label
from ..models.pr_files import ChangedFile, FileStatus


logger = logging.getLogger(__name__)


MAIN_PAGE_PATTERN = re.compile(r'^pages/')
TRANSLATION_PAGE_PATTERN = re.compile(r'^pages\.[a-z_]+/', re.IGNORECASE)
DOCUMENTATION_PATTERN = re.compile(r'\.md$', re.IGNORECASE)

COMMUNITY_FILES = frozenset({'MAINTAINERS.md', '.github/CODEOWNERS'})
DEFAULT_TOOLING_EXTENSIONS = ('js', 'ts', 'py', 'sh', 'yml', 'json')


def is_main_page(path: str) -> bool:
    """Canonical page under ``pages/``"""
    return bool(MAIN_PAGE_PATTERN.match(path)) and not is_translation_page(path)


def is_translation_page(path: str) -> bool:
    """Localized page under ``pages.<locale>/``"""
    return bool(TRANSLATION_PAGE_PATTERN.match(path))


def is_community_file(path: str) -> bool:
    return path in COMMUNITY_FILES


def is_documentation(path: str) -> bool:
    return bool(DOCUMENTATION_PATTERN.search(path))


def tooling_matcher(extensions: Iterable[str]) -> Callable[[str], bool]:
    """Build a predicate matching paths that end in one of ``extensions``"""
    normalized = sorted({ext.strip().lstrip('.') for ext in extensions if ext.strip()})
    if not normalized:
        return lambda path: False
    pattern = re.compile(r'\.(?:' + '|'.join(re.escape(ext) for ext in normalized) + r')$')
    return lambda path: bool(pattern.search(path))


@dataclass(frozen=True)
class PathRule:
    """
    One classification rule.

    ``labels_by_status`` gives the label per file status; ``default`` is used
    for statuses not listed there.
    """
    name: str
    predicate: Callable[[str], bool]
    labels_by_status: Dict[FileStatus, Label] = field(default_factory=dict)
    default: Optional[Label] = None

    def matches(self, file: ChangedFile) -> bool:
        return any(self.predicate(path) for path in file.paths)

    def label_for(self, file: ChangedFile) -> Optional[Label]:
        return self.labels_by_status.get(file.status, self.default)


def build_rules(tooling_extensions: Iterable[str] = DEFAULT_TOOLING_EXTENSIONS) -> List[PathRule]:
    """Classification rules in precedence order"""
    return [
        PathRule(
            name='main_page',
            predicate=is_main_page,
            labels_by_status={FileStatus.ADDED: Label.NEW_COMMAND},
            default=Label.PAGE_EDIT,
        ),
        PathRule(
            name='translation_page',
            predicate=is_translation_page,
            labels_by_status={FileStatus.ADDED: Label.NEW_TRANSLATION},
            default=Label.TRANSLATION_EDIT,
        ),
        PathRule(name='community', predicate=is_community_file, default=Label.COMMUNITY),
        PathRule(name='documentation', predicate=is_documentation, default=Label.DOCUMENTATION),
        PathRule(name='tooling', predicate=tooling_matcher(tooling_extensions), default=Label.TOOLING),
    ]


class PathClassifier:
    """
    Classifier for changed files.

    Rules are evaluated top to bottom and a file is considered to touch a
    category if either its current or its previous path matches.
    """

    def __init__(self, rules: Optional[Sequence[PathRule]] = None):
        self.rules = list(rules) if rules is not None else build_rules()

    @classmethod
    def with_tooling_extensions(cls, extensions: Iterable[str]) -> "PathClassifier":
        return cls(build_rules(extensions))

    def classify(self, file: ChangedFile) -> Optional[Label]:
        """
        Classify a single changed file.

        Args:
            file: Changed file to classify

        Returns:
            Matching label or None if no rule applies
        """
        for rule in self.rules:
            if rule.matches(file):
                label = rule.label_for(file)
                logger.debug(f"{file.filename} ({file.status.value}) matched {rule.name}: {label}")
                return label

        logger.debug(f"{file.filename} ({file.status.value}) matched no rule")
        return None

    def classify_all(self, files: Iterable[ChangedFile]) -> List[Label]:
        """Deduplicated labels for a set of files, in first-seen order"""
        labels: List[Label] = []
        for file in files:
            label = self.classify(file)
            if label is not None and label not in labels:
                labels.append(label)
        return labels


_default_classifier = PathClassifier()


def classify(file: ChangedFile) -> Optional[Label]:
    """Classify a file with the default rule set"""
    return _default_classifier.classify(file)
