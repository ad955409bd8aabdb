# nosqlqtf

Helpers for working with query test framework (QTF) case directories for a
NoSQL database. A case directory holds one sub-directory per suite. Each
suite has a `test.config` file, query files (`*.q`) and expected-result files
(`*.r`). This package reads that layout into Python objects so that your own
harness can run the queries and check the results.

## Installation

```
pip install nosqlqtf
```

For development and tests:

```
pip install "nosqlqtf[test]"
pytest
```

## Modules

### `nosqlqtf.suite`

- `TestRunner(root_dir)` lists the suite directories under `root_dir` and
  stores them, sorted, in `dir_names`.
  - It reads the expected-failure list from
    `testdata/expectedQTFfailure.cloudsim.txt`. The path is relative to the
    current directory, and a `QtfError` is raised if the file is missing.
  - Two environment variables narrow a run. Each takes a comma-separated list:
    - `QTF_TEST_SUITES` names the suites to run.
    - `QTF_TEST_CASES` names the test cases to run, with the `.q` suffix.
  - `get_num_tests(name)` counts the files in a suite's `q` directory. It
    returns 0 if the directory cannot be read.
  - `is_excluded_test_suite(name)` reports whether a suite should not be run.
  - `get_test_suite(name)` parses the suite's `test.config` and returns a
    `TestSuite`. It handles these keys:
    - `before-ddl-file`
    - `after-ddl-file`
    - `before-data-file`
    - `before-class`
    - `run-...`, including dependency suites
    - `var-...`
- `TestSuite` is a dataclass holding a suite's settings: directories, DDL
  statements, rows to insert, external variables, exclusions and dependencies.
  - `get_test_case_names()` returns the sorted `.q` file names.
  - `get_test_case(name)` reads the query and the expected result into a
    `TestCase`.
  - `is_excluded_test_case(name)` reports whether a case should not be run.
- `TestCase` is a dataclass with these fields:
  - `query_stmts`
  - `expect_results`
  - `expect_ordered_result`
  - `expect_compile_err`
  - `expect_runtime_err`
  - `expect_err_messages`

### `nosqlqtf.files`

Helpers for reading QTF files. Problems with files are raised as `QtfError`.

- `read_lines_from_file(filename, strip_comments, strip_empty)` can drop
  `#` and `//` comment lines, trailing `//` comments and blank lines.
- `read_blocks_from_file(filename)` returns blocks of text separated by empty
  lines. Each block is joined into one line.
- `read_data_file(file)` reads `table: <name>` sections, each followed by
  JSON objects that may span several lines. It returns a dict of table name
  to a list of row dicts. Records that are not valid JSON are logged as
  warnings and skipped.
- `parse_excluded_tests(filename)` reads exclusion lines and maps suite names
  to excluded cases. A line of the form `suite` or `suite/dir` excludes the
  whole suite and is stored as `*`.
- `get_subdirs(path, dirs)` returns the sorted names of the sub-directories of
  `path` when `dirs` is true, and of its files otherwise.
- `num_curly_brace_unmatched(s)` counts the unmatched braces outside quoted
  strings.

### `nosqlqtf.variables`

`parse_variables(name, value)` turns a `var-$name=value` setting into an
`ExtVariable(name, value)`.

- `null` or an empty value gives `None`.
- `jnull` gives the `JsonNull` singleton.
- Values written as `type:<kind>:<text>` accept these kinds: `int`, `long`,
  `number`, `json`, `string`, `double` and `boolean`.
- Any other literal has its type inferred:
  - a 32-bit int, then a 64-bit int, then a float, then a `Decimal`;
  - a quoted string;
  - a JSON object or array;
  - `true` or `false` from the first letter.

Values that cannot be parsed raise `QtfError`.

### `nosqlqtf.setups`

`setup_for_class(name)` returns the built-in setup named by a `before-class`
property. It returns `None` for unknown names. Each setup has
`before_ddls()`, `after_ddls()` and `before_data()`. The setups are:

- `PrimIndexSetup`
- `PrimIndexSetup2`
- `PrimIndexSetup3`
- `UserTable`
- `Data1Setup`
- `Data2Setup`

### `nosqlqtf.javarandom`

`Random(seed)` gives the same sequence as Java's `java.util.Random`. It has
two methods:

- `next(bits)` takes `bits` from 1 to 32.
- `next_int(bound)` requires `bound >= 2`.

`PrimIndexSetup2` uses it so that its generated rows are reproducible.

### `nosqlqtf.prepared`

`PreparedStatement` holds a serialized prepared query, its optional client
plan and its bind variables.

- `set_variable(name, value)` binds a named variable.
- `set_variable_by_id(id, value)` binds a positional variable, stored as
  `#<id>`.
- `get_variable_by_id(id)` looks a value up through `variable_to_ids`.
- `copy_for_internal()` returns a copy with only the statement and the bound
  variables.
- `reset()` resets the client plan.
- `is_simple()` and `is_empty()` report the statement's state.

A plain `copy.copy()` drops the bound variables.

### `nosqlqtf.put`

`PutRequest(table_name)` describes a single-row put. Its builder methods
return the request itself, so calls can be chained:

- `value`
- `timeout`
- `compartment_id`
- `return_row`
- `ttl`
- `use_table_ttl`
- `if_version`
- `if_absent`
- `if_present`

Two methods report what the request will do:

- `op_code()` returns the `OpCode` implied by the conditions.
- `ttl_spec()` returns the time-to-live text, either `"N HOURS"` or
  `"N DAYS"`. It gives at least one hour, and `None` when no TTL is sent.

`PutResult` is a dataclass for the outcome of a put.

## Example

```python
from nosqlqtf.suite import TestRunner

runner = TestRunner("/path/to/query/cases")
for name in runner.dir_names:
    if runner.is_excluded_test_suite(name):
        continue
    suite = runner.get_test_suite(name)
    if not suite.test_case_dir or not suite.test_result_dir:
        continue
    for case_name in suite.get_test_case_names():
        if suite.is_excluded_test_case(case_name):
            continue
        case = suite.get_test_case(case_name)
        print(case.name, case.query_stmts, case.expect_results)
```

Building a conditional put:

```python
from datetime import timedelta
from nosqlqtf.put import PutRequest, OpCode

req = PutRequest("users").value({"id": 1, "name": "Jane"}).if_absent()
assert req.op_code() is OpCode.PUT_IF_ABSENT
req.ttl(timedelta(days=2))
print(req.ttl_spec())  # "2 DAYS"
```

## What this package does not do

It does not connect to a database. It has no client handle and no network
protocol, so nothing in it executes DDL, inserts data or runs queries:

- `PutRequest` only records the settings of a put and never sends it.
- `PreparedStatement` only holds data it is given; it does not prepare
  queries itself.
- No code compares query results against the expected results.

Running suites end to end, including setup, teardown and result checking, is
left to the harness that uses these objects.