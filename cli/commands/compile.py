from __future__ import annotations

from typing import Optional

from cli.common import parse_env_pairs
from toolchain.core_cmd import Executor
from toolchain.errors import CommandFailedError, ToolNotFoundError
from toolchain.jack import JackCompiler, get_jack_compiler
from toolchain.locate import ToolchainConfig


def configure_compiler(args, compiler: JackCompiler) -> JackCompiler:
    """Apply compile-mode flags to ``compiler`` in a fixed, documented order."""
    for lib in args.imports:
        compiler.import_file(lib)
    for d in args.import_meta:
        compiler.import_meta(d)
    for d in args.import_resource:
        compiler.import_resource(d)
    if args.classpath:
        compiler.set_class_path(args.classpath)
    if args.incremental_folder:
        compiler.incremental_folder(args.incremental_folder)
    if args.multi_dex:
        compiler.multi_dex(args.multi_dex)
    if args.output_dex:
        compiler.output_dex(args.output_dex)
    if args.output_jack:
        compiler.output_jack(args.output_jack)
    if args.processor:
        compiler.processor(args.processor)
    if args.processor_path:
        compiler.processor_path(args.processor_path)
    if args.verbose_mode:
        compiler.verbose(args.verbose_mode)
    for prop in args.properties:
        compiler.set_property(prop)
    for opt in args.annotation_options:
        compiler.add_annotation_processor(opt)
    if args.debug:
        compiler.set_debug()
    for key, val in parse_env_pairs(args.env_pairs).items():
        compiler.set_env_var(key, val)
    return compiler


def run_compile(
    args,
    config: ToolchainConfig,
    *,
    executor: Optional[Executor] = None,
) -> int:
    try:
        compiler = get_jack_compiler(config, executor=executor)
    except ToolNotFoundError as e:
        raise SystemExit(f"ERROR: {e}") from e

    configure_compiler(args, compiler)
    if args.timeout_seconds:
        compiler.timeout(args.timeout_seconds)

    if args.dry_run:
        print("  Command :", " ".join(compiler.args + list(args.inputs)))
        for key, val in compiler.env.items():
            print(f"  Env     : {key}={val}")
        print("  (dry-run: not executing)")
        return 0

    print(f"\n🚀 Compiling {len(args.inputs)} file(s) with Jack")
    try:
        lines = compiler.compile(args.inputs)
    except CommandFailedError as e:
        print(f"\n⚠️ Jack failed:\n{e}")
        return 1

    for ln in lines:
        print(ln)
    print("\n✅ Compile completed.")
    return 0
