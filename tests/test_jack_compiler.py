from __future__ import annotations

from pathlib import Path

import pytest

from conftest import RecordingExecutor, make_config
from toolchain.errors import CommandFailedError, ToolNotFoundError
from toolchain.jack import JACK_NOT_FOUND_HINT, JackCompiler, get_jack_compiler
from toolchain.locate import ANDROID_BUILD_TOP_ENV, ToolchainConfig

BASE = ["java", "-jar", "/opt/jack.jar"]


def test_get_jack_compiler_fails_fast_when_jack_is_missing(tmp_path: Path) -> None:
    cfg = ToolchainConfig.from_env({ANDROID_BUILD_TOP_ENV: str(tmp_path)})
    executor = RecordingExecutor()

    with pytest.raises(ToolNotFoundError) as exc:
        get_jack_compiler(cfg, executor=executor)

    assert str(exc.value) == JACK_NOT_FOUND_HINT
    assert not executor.called


def test_get_jack_compiler_launches_located_jar(toolchain_dir: Path) -> None:
    cfg = ToolchainConfig.from_env({ANDROID_BUILD_TOP_ENV: str(toolchain_dir)})

    compiler = get_jack_compiler(cfg)

    assert compiler.args == ["java", "-jar", str(cfg.jack.path)]


def test_string_and_sequence_constructors_agree() -> None:
    assert JackCompiler("java  -jar\t/opt/jack.jar").args == JackCompiler(BASE).args


def test_configuration_methods_append_flag_value_pairs() -> None:
    compiler = (
        JackCompiler(BASE)
        .import_file("a.jack")
        .import_meta("meta/")
        .import_resource("res/")
        .incremental_folder("inc/")
        .multi_dex("native")
        .output_dex("out/")
        .output_jack("out.jack")
        .processor("com.Proc")
        .processor_path("procs.jar")
        .verbose("info")
        .add_annotation_processor("key=value")
        .set_property("jack.java.source.version=1.8")
        .set_class_path("lib.jar")
        .set_debug()
    )

    assert compiler.args == BASE + [
        "--import", "a.jack",
        "--import-meta", "meta/",
        "--import-resource", "res/",
        "--incremental-folder", "inc/",
        "--multi-dex", "native",
        "--output-dex", "out/",
        "--output-jack", "out.jack",
        "--processor", "com.Proc",
        "--processorpath", "procs.jar",
        "--verbose", "info",
        "-A", "key=value",
        "-D", "jack.java.source.version=1.8",
        "-cp", "lib.jar",
        "-g",
    ]


def test_repeated_import_appends_in_call_order() -> None:
    compiler = JackCompiler(BASE).import_file("first.jack").import_file("second.jack")
    assert compiler.args[-4:] == ["--import", "first.jack", "--import", "second.jack"]


def test_set_env_var_last_call_wins() -> None:
    compiler = JackCompiler(BASE).set_env_var("JAVA_OPTS", "-Xmx1g").set_env_var("JAVA_OPTS", "-Xmx4g")

    assert compiler.env == {"JAVA_OPTS": "-Xmx4g"}
    assert compiler.args == BASE


def test_compile_calls_are_independent() -> None:
    executor = RecordingExecutor(["compiled"])
    compiler = JackCompiler(BASE, executor=executor).output_dex("out/").set_env_var("K", "v")

    assert compiler.compile(["A.java", "B.java"]) == ["compiled"]
    compiler.compile([Path("C.java")])

    first, second = executor.commands
    assert list(first.args) == BASE + ["--output-dex", "out/", "A.java", "B.java"]
    assert list(second.args) == BASE + ["--output-dex", "out/", "C.java"]
    assert dict(second.env) == {"K": "v"}
    assert compiler.args == BASE + ["--output-dex", "out/"]


def test_compile_preserves_file_order() -> None:
    executor = RecordingExecutor()
    files = ["z/Last.java", "a/First.java", "m/Middle.java"]

    JackCompiler(BASE, executor=executor).compile(iter(files))

    assert executor.last_args[-3:] == files


@pytest.mark.parametrize("single", ["Foo.java", Path("Foo.java")])
def test_compile_accepts_a_single_path(single) -> None:
    executor = RecordingExecutor()

    JackCompiler(BASE, executor=executor).compile(single)

    assert executor.last_args == BASE + ["Foo.java"]


def test_compile_failure_propagates_unchanged() -> None:
    failure = CommandFailedError(BASE + ["Bad.java"], ["Bad.java:1: error"])
    compiler = JackCompiler(BASE, executor=RecordingExecutor(fail_with=failure))

    with pytest.raises(CommandFailedError) as exc:
        compiler.compile(["Bad.java"])

    assert exc.value is failure


def test_timeout_and_working_directory_reach_the_command(tmp_path: Path) -> None:
    executor = RecordingExecutor()
    compiler = JackCompiler(BASE, executor=executor).timeout(60).working_directory(tmp_path)

    compiler.compile(["A.java"])

    cmd = executor.commands[0]
    assert cmd.timeout_seconds == 60
    assert cmd.working_directory == tmp_path


def test_tool_not_found_is_a_command_failure_with_empty_command() -> None:
    with pytest.raises(CommandFailedError) as exc:
        get_jack_compiler(make_config())

    assert exc.value.command == []
    assert exc.value.output_lines == [JACK_NOT_FOUND_HINT]
