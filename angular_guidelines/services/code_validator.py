"""
规则校验引擎：对一段 Angular / TypeScript 代码做关键字检查。

不是静态分析：每条规则只是大小写敏感的子串判断。规则彼此独立，
全部执行、不短路，结果按规则表顺序输出。
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from angular_guidelines.core.exceptions import InvalidArgumentError
from angular_guidelines.schemas.mcp_types import RuleFinding, Severity

logger = logging.getLogger(__name__)

CODE_CATEGORIES = ["component", "service", "general"]


@dataclass(frozen=True)
class Rule:
    name: str
    severity: Severity
    message: str
    # predicate(code, category) 为 True 时产生一条 finding
    predicate: Callable[[str, Optional[str]], bool]

    def check(self, code: str, category: Optional[str]) -> Optional[RuleFinding]:
        if self.predicate(code, category):
            return RuleFinding(severity=self.severity, message=self.message)
        return None


def _contains_any(*needles: str) -> Callable[[str, Optional[str]], bool]:
    def predicate(code: str, category: Optional[str]) -> bool:
        return any(needle in code for needle in needles)
    return predicate


def _missing_all(category: str, *needles: str) -> Callable[[str, Optional[str]], bool]:
    """仅在指定 category 下生效：所有 needle 都不出现时命中"""
    def predicate(code: str, current: Optional[str]) -> bool:
        return current == category and not any(needle in code for needle in needles)
    return predicate


VALIDATION_RULES: List[Rule] = [
    Rule(
        name="no-any",
        severity=Severity.BLOCKING,
        message='Avoid using "any" type - use specific types or "unknown" instead',
        predicate=_contains_any("any"),
    ),
    Rule(
        name="native-control-flow",
        severity=Severity.BLOCKING,
        message="Use native control flow (@if, @for, @switch) instead of structural directives",
        predicate=_contains_any("*ngIf", "*ngFor", "*ngSwitch"),
    ),
    Rule(
        name="no-ng-class",
        severity=Severity.BLOCKING,
        message="Use [class] bindings instead of ngClass",
        predicate=_contains_any("ngClass"),
    ),
    Rule(
        name="no-ng-style",
        severity=Severity.BLOCKING,
        message="Use [style] bindings instead of ngStyle",
        predicate=_contains_any("ngStyle"),
    ),
    Rule(
        name="signal-inputs",
        severity=Severity.ADVISORY,
        message="Consider using input() and output() functions instead of decorators",
        predicate=_contains_any("@Input()", "@Output()"),
    ),
    Rule(
        name="on-push",
        severity=Severity.ADVISORY,
        message="Consider using OnPush change detection strategy for better performance",
        predicate=_missing_all("component", "ChangeDetectionStrategy.OnPush"),
    ),
    Rule(
        name="signals-state",
        severity=Severity.SUGGESTION,
        message="Consider using signals for state management",
        predicate=_missing_all("component", "signal(", "computed("),
    ),
    Rule(
        name="inject-function",
        severity=Severity.ADVISORY,
        message="Consider using inject() function instead of constructor injection",
        predicate=_missing_all("service", "inject("),
    ),
    Rule(
        name="provided-in-root",
        severity=Severity.SUGGESTION,
        message='Consider using providedIn: "root" for singleton services',
        predicate=_missing_all("service", "providedIn: 'root'"),
    ),
]


def validate_code(
    code: Optional[str],
    category: Optional[str] = None,
    rules: Optional[List[Rule]] = None,
) -> List[RuleFinding]:
    """
    按顺序执行所有规则，返回命中的 finding 列表。空列表表示通过校验。

    code 为 None 时抛 InvalidArgumentError；category 必须是
    CODE_CATEGORIES 之一或 None。
    """
    if code is None:
        raise InvalidArgumentError("Missing required argument: code")
    if category is not None and category not in CODE_CATEGORIES:
        raise InvalidArgumentError(
            f"Invalid code type: {category} (expected one of {', '.join(CODE_CATEGORIES)})"
        )

    findings: List[RuleFinding] = []
    for rule in VALIDATION_RULES if rules is None else rules:
        finding = rule.check(code, category)
        if finding is not None:
            findings.append(finding)

    logger.debug(f"[CodeValidator] category={category}, 命中 {len(findings)} 条规则")
    return findings
