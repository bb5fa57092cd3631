"""Shared test fixtures for healthcast tests."""

import pytest

from healthcast.signals import FileSignal

COMPONENT_TSX = """import React, { useState } from "react";

export default function Counter() {
  const [count, setCount] = useState(0);
  return (
    <button className="px-4 py-2 bg-blue-500 rounded" onClick={() => setCount(count + 1)}>
      {count}
    </button>
  );
}
"""

PLAIN_UTIL_JS = """export function clamp(value, lo, hi) {
  if (value < lo) return lo;
  if (value > hi) return hi;
  return value;
}
"""

TEST_TS = """import { clamp } from "./clamp";

describe("clamp", () => {
  it("keeps values in range", () => {
    expect(clamp(5, 0, 3)).toBe(3);
  });
});
"""


@pytest.fixture
def component_source():
    """A typical hook-using, utility-styled function component."""
    return COMPONENT_TSX


@pytest.fixture
def plain_source():
    """A plain helper module with no component idioms."""
    return PLAIN_UTIL_JS


@pytest.fixture
def make_signals():
    """Build a list of FileSignal records from per-flag counts.

    Each flag is assigned to the first ``count`` files, so flags overlap the
    same way real projects do (components are usually also typed, etc.).
    """

    def _make(total, component_like=0, state_hooks=0, typed_source=0, utility_styling=0, test_files=0):
        return [
            FileSignal(
                path=f"src/file{i}.tsx",
                is_component_like=i < component_like,
                uses_state_hooks=i < state_hooks,
                is_typed_source=i < typed_source,
                uses_utility_styling=i < utility_styling,
                is_test_file=i < test_files,
            )
            for i in range(total)
        ]

    return _make


@pytest.fixture
def project_dir(tmp_path):
    """A small on-disk project with components, a helper, a test and a stub."""
    root = tmp_path / "project"
    (root / "src" / "components").mkdir(parents=True)
    (root / "src" / "utils").mkdir(parents=True)
    (root / "src" / "empty").mkdir(parents=True)
    (root / "node_modules" / "react").mkdir(parents=True)

    (root / "src" / "components" / "Counter.tsx").write_text(COMPONENT_TSX)
    (root / "src" / "utils" / "clamp.js").write_text(PLAIN_UTIL_JS)
    (root / "src" / "utils" / "clamp.test.ts").write_text(TEST_TS)
    (root / "src" / "utils" / "index.ts").write_text("export {};\n")
    (root / "src" / "README.md").write_text("# not a source file\n")
    (root / "node_modules" / "react" / "index.js").write_text(PLAIN_UTIL_JS)
    return root

