from __future__ import annotations

import pytest

from xescsv.reader import parse_log


SCENARIO_XES = """<?xml version="1.0" encoding="UTF-8"?>
<log xes.version="1.0" xmlns="http://www.xes-standard.org/">
  <extension name="Concept" prefix="concept" uri="http://www.xes-standard.org/concept.xesext"/>
  <global scope="event">
    <string key="concept:name" value="__INVALID__"/>
  </global>
  <trace>
    <string key="concept:name" value="case1"/>
    <event>
      <string key="activity" value="start"/>
    </event>
    <event>
      <date key="timestamp" value="2024-01-01T00:00:00"/>
    </event>
  </trace>
</log>
"""


MULTI_TRACE_XES = """<?xml version="1.0" encoding="UTF-8"?>
<log>
  <trace>
    <string key="concept:name" value="  A-1  "/>
    <string key="org:group" value="sales"/>
    <event>
      <string key="concept:name" value="Create order"/>
      <string key="org:resource" value="  alice "/>
      <date key="time:timestamp" value="2024-03-01T09:00:00.000+01:00"/>
      <int key="cost" value="12"/>
    </event>
    <event>
      <string key="concept:name" value="Ship, order"/>
      <date key="time:timestamp" value="2024-03-02T10:30:00.000+01:00"/>
    </event>
  </trace>
  <trace>
    <string key="concept:name" value="A-2"/>
    <event>
      <string key="concept:name" value="Create order"/>
      <string key="note" value="said &quot;hi&quot;"/>
    </event>
  </trace>
  <trace>
    <string key="concept:name" value="A-3"/>
  </trace>
</log>
"""


@pytest.fixture
def scenario_xes():
    return SCENARIO_XES


@pytest.fixture
def multi_trace_xes():
    return MULTI_TRACE_XES


@pytest.fixture
def scenario_log():
    return parse_log(SCENARIO_XES.encode("utf-8"))


@pytest.fixture
def multi_trace_log():
    return parse_log(MULTI_TRACE_XES.encode("utf-8"))


@pytest.fixture
def write_xes(tmp_path):
    def _write(content: str, name: str = "log.xes"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so anything loaded from a .env file is undone afterwards
    for name in ("XESCSV_COLUMN_ORDER", "XESCSV_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
