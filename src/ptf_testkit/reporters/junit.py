
from typing import TYPE_CHECKING
import xml.etree.ElementTree as ET
from ..layout import stringify

if TYPE_CHECKING:
    from ..runners.suite import Suite

class JUnitReporter:
    def __init__(self, path: str): self.path = path
    def emit(self, suite: "Suite") -> None:
        stats = suite.stats()
        testsuite = ET.Element("testsuite", name=suite.name, tests=str(stats.total),
                               failures=str(stats.failed), skipped="0",
                               time=f"{stats.duration / 1000:.3f}")
        props = ET.SubElement(testsuite, "properties")
        for key, value in suite.metadata.model_dump().items():
            ET.SubElement(props, "property", name=key, value=str(value))
        for r in suite.results:
            tc = ET.SubElement(testsuite, "testcase", classname=suite.name, name=f"{r.id} {r.description}")
            if not r.passed:
                failure = ET.SubElement(tc, "failure", message=r.message or "failed")
                lines = []
                if r.expected is not None and r.actual is not None:
                    lines.append(f"Expected: {stringify(r.expected)}")
                    lines.append(f"Actual:   {stringify(r.actual)}")
                failure.text = "\n".join(lines)
        ET.ElementTree(testsuite).write(self.path, encoding="utf-8", xml_declaration=True)
