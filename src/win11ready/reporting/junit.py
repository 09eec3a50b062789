from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from win11ready.evaluator import EvaluationResult

SUITE_NAME = "win11ready"


def write_junit(path: Path, result: EvaluationResult) -> Path:
    """Write junit.xml with one test case per facet, return path."""
    xml = JUnitXml()
    suite = TestSuite(SUITE_NAME)

    suite.add_property("returnCode", str(result.return_code))
    suite.add_property("returnResult", result.return_result)
    suite.add_property("returnReason", result.return_reason)

    for r in result.facets:
        case = TestCase(r.facet.display_name)
        case.classname = r.facet.value
        if not r.passed:
            case.result = [Failure(r.detail)]
        suite.add_testcase(case)

    # Use append (not +=) to preserve properties
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
