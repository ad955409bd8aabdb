"""Query test suites, test cases and the runner that discovers them."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

from nosqlqtf.files import (
    QtfError,
    get_subdirs,
    parse_excluded_tests,
    read_blocks_from_file,
    read_data_file,
    read_lines_from_file,
)
from nosqlqtf.setups import setup_for_class
from nosqlqtf.variables import parse_variables

logger = logging.getLogger(__name__)

EXPECTED_FAILURE_FILE = "testdata/expectedQTFfailure.cloudsim.txt"


def _join(first: str, second: str) -> str:
    return f"{first}/{second}"


@dataclass
class TestCase:
    """A query test case: a ``.q`` input file and its ``.r`` expected result."""

    __test__ = False

    name: str = ""
    query_stmts: str = ""
    expect_results: list[str] = field(default_factory=list)
    expect_ordered_result: bool = False
    expect_compile_err: bool = False
    expect_runtime_err: bool = False
    expect_err_messages: list[str] = field(default_factory=list)


@dataclass
class TestSuite:
    """A directory of query test cases sharing one configuration."""

    __test__ = False

    name: str = ""
    dir: str = ""
    test_case_dir: str = ""
    test_result_dir: str = ""
    before_ddls: list[str] = field(default_factory=list)
    after_ddls: list[str] = field(default_factory=list)
    before_data: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    external_vars: dict[str, Any] = field(default_factory=dict)
    excluded_test_cases: dict[str, bool] = field(default_factory=dict)
    included_test_cases: dict[str, bool] = field(default_factory=dict)
    is_set_up: bool = False
    dependencies: list[TestSuite] = field(default_factory=list)

    def get_test_case_names(self) -> list[str]:
        """Return the sorted names of the ``.q`` files in the test case directory."""
        logger.debug(
            "test case names: name=%s dir=%s tcdir=%s", self.name, self.dir, self.test_case_dir
        )
        return sorted(n for n in get_subdirs(self.test_case_dir, False) if n.endswith(".q"))

    def get_test_case(self, name: str) -> TestCase:
        """Read the query and expected result of the named test case."""
        if not name.endswith(".q") or len(name) <= 2:
            raise QtfError(f"test case file name extention must be .q, got invalid name {name}")

        result_file = _join(self.test_result_dir, name[:-1] + "r")
        results = read_lines_from_file(result_file, True, True)
        if not results:
            raise QtfError(f"test result file {result_file} is empty")

        case = TestCase(name=name)
        case.query_stmts = " ".join(
            read_lines_from_file(_join(self.test_case_dir, name), True, True)
        )

        result_type = results[0].lower()
        rest = results[1:]
        if "unordered-result" in result_type:
            case.expect_ordered_result = False
        elif "ordered-result" in result_type:
            case.expect_ordered_result = True
        elif "compile-exception" in result_type:
            case.expect_compile_err = True
        elif "runtime-exception" in result_type:
            case.expect_runtime_err = True
        else:
            raise QtfError(f"unknown result type {result_type}")

        if not case.expect_compile_err and not case.expect_runtime_err:
            case.expect_results = rest
        elif case.expect_runtime_err:
            case.expect_err_messages = rest
        return case

    def is_excluded_test_case(self, name: str) -> bool:
        """Report whether the named test case should not be run."""
        if self.included_test_cases and name not in self.included_test_cases:
            return True
        if name in self.excluded_test_cases:
            return True
        return f"{name}.q" in self.excluded_test_cases


def _split_env(var: str) -> dict[str, bool]:
    value = os.environ.get(var)
    if value is None:
        return {}
    return {name: True for name in value.split(",")}


class TestRunner:
    """Discovers the test suites under a root directory."""

    __test__ = False

    def __init__(self, root_dir: str) -> None:
        self.qtf_root_dir = root_dir
        self.dir_names = get_subdirs(root_dir, True)
        self.excluded_tests = parse_excluded_tests(EXPECTED_FAILURE_FILE)
        self.included_suites = _split_env("QTF_TEST_SUITES")
        self.included_tests = _split_env("QTF_TEST_CASES")
        for name in self.included_suites:
            logger.info("Including any suite named '%s'", name)
        for name in self.included_tests:
            logger.info("Including any test named '%s'", name)

    def get_num_tests(self, suite_name: str) -> int:
        """Return the number of files in the suite's ``q`` directory, 0 if unreadable."""
        try:
            files = get_subdirs(_join(_join(self.qtf_root_dir, suite_name), "q"), False)
        except QtfError:
            return 0
        return len(files)

    def is_excluded_test_suite(self, name: str) -> bool:
        """Report whether the named test suite should not be run."""
        if self.included_suites and name not in self.included_suites:
            return True
        return self.excluded_tests.get(name, {}).get("*", False)

    def get_test_suite(self, name: str) -> TestSuite:
        """Read the ``test.config`` of the named suite."""
        suite_dir = _join(self.qtf_root_dir, name)
        lines = read_lines_from_file(_join(suite_dir, "test.config"), True, True)
        suite = TestSuite(name=name, dir=suite_dir, included_test_cases=dict(self.included_tests))

        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("#") or line.startswith("//"):
                continue
            parts = line.split("=")
            if len(parts) < 2:
                continue
            key = parts[0].strip()
            arg = parts[1].strip()
            fname = _join(suite.dir, arg)

            if key == "before-ddl-file":
                suite.before_ddls = read_blocks_from_file(fname)
            elif key == "before-data-file":
                suite.before_data = read_data_file(fname)
            elif key == "after-ddl-file":
                suite.after_ddls = read_blocks_from_file(fname)
            elif key == "before-class":
                setup = setup_for_class(arg)
                if setup is not None:
                    suite.before_ddls = setup.before_ddls()
                    suite.after_ddls = setup.after_ddls()
                    suite.before_data = setup.before_data()

            if key.startswith("run-"):
                if len(parts) < 3:
                    raise QtfError(f"invalid test suite config: {line}")
                suite.test_result_dir = _join(suite.dir, parts[2].strip())
                open_idx = arg.find("(")
                close_idx = arg.find(")")
                if open_idx >= 0 and close_idx >= 0:
                    suite.test_case_dir = _join(suite.dir, arg[:open_idx])
                    if close_idx > open_idx:
                        for dep in arg[open_idx + 1 : close_idx].split(","):
                            dep_name = dep.strip()
                            if not dep_name:
                                continue
                            if dep_name.startswith("//"):
                                suite.dependencies.append(self.get_test_suite(dep_name[2:]))
                            else:
                                suite.dependencies.append(
                                    self.get_test_suite(_join(suite.name, dep_name))
                                )
            elif key.startswith("var-"):
                value = line[line.index("=") + 1 :].strip()
                var = parse_variables(key[4:], value)
                suite.external_vars[var.name] = var.value
        return suite