"""Compiler class for frontkit.

This module implements the Compiler class that turns a validated
BuildDescription into a BundlerConfig:

- Transform-chain builder -> module rules (one per declared file type)
- Chunk-splitting planner -> cache groups and base chunks
- Plugin assembler -> plugin list (after base chunks are final)
- Output paths, resolve order and minimizers

Compilation is all-or-nothing: a fatal error aborts before any
configuration is returned. Each call builds fresh structures, so
compiling the same description twice yields equal configurations.
"""

from __future__ import annotations

import structlog

from frontkit_core.compiler.chain_builder import build_module_rule, resolve_engine
from frontkit_core.compiler.models import (
    BundlerConfig,
    ModuleConfig,
    ModuleRule,
    OptimizationBlock,
    OutputConfig,
    ResolveConfig,
    ResolveLoaderConfig,
    SplitChunksConfig,
)
from frontkit_core.compiler.plugins import assemble_plugins
from frontkit_core.compiler.splitting import plan_splitting
from frontkit_core.compiler.typescript import TS_TRANSPILE_ONLY_WARNING
from frontkit_core.context import BuildContext, Env
from frontkit_core.schemas import SCRIPT_ENGINES, BuildDescription
from frontkit_core.urls import get_path_from_url

logger = structlog.get_logger(__name__)

DEFAULT_EXTENSIONS = (".wasm", ".mjs", ".js", ".json")
CSS_MINIMIZER = "css-minimizer"


class Compiler:
    """Compile a BuildDescription to a BundlerConfig.

    The environment and mode come from the BuildContext given at
    construction; nothing else is read from process state.

    Example:
        >>> context = BuildContext(root=Path("project"), env=Env.production)
        >>> config = Compiler(context).compile(BuildDescription.from_file("project/build-config.json"))
        >>> config.mode
        'production'
    """

    def __init__(self, context: BuildContext) -> None:
        """Initialize the Compiler.

        Args:
            context: Build context (project root, environment, mode).
        """
        self.context = context

    def compile(self, description: BuildDescription) -> BundlerConfig:
        """Compile the build description.

        Args:
            description: Validated build description. Not mutated.

        Returns:
            Immutable BundlerConfig.

        Raises:
            InvalidTransformConfig: If a declared transform cannot be compiled.
        """
        context = self.context

        rules = self._build_rules(description)
        plan = plan_splitting(description.optimization, context.env)

        # Plugins are assembled after the base chunk list is final
        plugins = assemble_plugins(description, plan.base_chunks, context=context)

        ignore_warnings: list[str] = []
        if any(rule.chain.transpile_only for rule in rules):
            ignore_warnings.append(TS_TRANSPILE_ONLY_WARNING)

        config = BundlerConfig(
            mode="development" if context.env is Env.development else "production",
            context=str(context.root),
            entry={name: str(context.abs(path)) for name, path in description.entries.items()},
            output=self._output_config(description),
            resolve=ResolveConfig(
                extensions=self._resolve_extensions(description),
                modules=[
                    str(context.abs(description.src_dir)),
                    "node_modules",
                    str(context.abs("node_modules")),
                ],
            ),
            resolve_loader=ResolveLoaderConfig(modules=["node_modules"]),
            module=ModuleConfig(rules=rules),
            optimization=OptimizationBlock(
                minimizer=["...", CSS_MINIMIZER],
                split_chunks=SplitChunksConfig(cache_groups=plan.cache_groups),
            ),
            plugins=plugins,
            ignore_warnings=ignore_warnings,
        )

        logger.debug(
            "compile_completed",
            env=context.env.value,
            mode=context.mode.value,
            rules=len(rules),
            plugins=len(plugins),
            cache_groups=sorted(plan.cache_groups),
        )
        return config

    def _build_rules(self, description: BuildDescription) -> list[ModuleRule]:
        """Build one module rule per declared transform, in declaration order."""
        return [
            build_module_rule(
                file_type,
                transform,
                context=self.context,
                targets=description.targets.browsers,
                polyfill=description.optimization.add_polyfill,
            )
            for file_type, transform in description.transforms.items()
        ]

    def _output_config(self, description: BuildDescription) -> OutputConfig:
        """Output block.

        Production uses the public URL verbatim; other environments serve
        locally and only keep its path.
        """
        if self.context.env is Env.production:
            public_path = description.public_url
        else:
            public_path = get_path_from_url(description.public_url)

        return OutputConfig(
            path=str(self.context.abs(description.dist_dir)),
            public_path=public_path,
        )

    def _resolve_extensions(self, description: BuildDescription) -> list[str]:
        """Default extensions plus one per declared script file type."""
        extensions = list(DEFAULT_EXTENSIONS)
        for file_type, transform in description.transforms.items():
            if resolve_engine(file_type, transform) not in SCRIPT_ENGINES:
                continue
            extension = f".{file_type}"
            if extension not in extensions:
                extensions.append(extension)
        return extensions
