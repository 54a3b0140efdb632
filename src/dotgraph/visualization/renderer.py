"""Graph rendering using Graphviz."""

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional, Union

import graphviz

from ..core.exceptions import RenderError
from ..core.models import RendererConfig

logger = logging.getLogger(__name__)


class GraphRenderer:
    """Renders DOT language to various output formats using Graphviz."""

    def __init__(self, config: Optional[RendererConfig] = None):
        """Initialize renderer.

        Args:
            config: Renderer configuration; defaults to ``dot`` on the PATH.
        """
        self.config = config or RendererConfig()

    def check_installation(self) -> bool:
        """Check if the configured Graphviz executable is accessible."""
        found = shutil.which(self.config.executable) is not None
        if found:
            logger.info(f"Graphviz executable found: {self.config.executable}")
        else:
            logger.warning(f"Graphviz executable not found: {self.config.executable}")
        return found

    def render_file(
        self,
        dot_file: Union[str, Path],
        output_file: Union[str, Path],
        output_format: str,
    ) -> Path:
        """Render a DOT file with the Graphviz executable.

        Runs ``<path>/dot -T<format> -o<output> <dot_file>`` and blocks until
        it exits.

        Args:
            dot_file: Path of the DOT source.
            output_file: Path of the file to generate.
            output_format: Graphviz output format (png, svg, pdf, ...).

        Returns:
            Path to the generated file.

        Raises:
            RenderError: If the executable is missing or exits non-zero.
        """
        output_path = Path(output_file)
        command = [
            self.config.executable,
            f"-T{output_format}",
            f"-o{output_path}",
            str(dot_file),
        ]

        logger.info(f"Rendering graph to {output_format} format")
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise RenderError(f"Failed to execute {self.config.executable}: {e}") from e

        if result.returncode != 0:
            raise RenderError(result.stdout.strip(), returncode=result.returncode)

        logger.info(f"Graph rendered successfully to: {output_path}")
        return output_path

    def render(
        self,
        dot_content: str,
        output_file: Union[str, Path],
        output_format: str,
    ) -> Path:
        """Render DOT content to the specified format.

        The content is written to a temporary file which is removed whether
        or not rendering succeeds.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.
            output_format: Graphviz output format.

        Returns:
            Path to the generated file.
        """
        handle = tempfile.NamedTemporaryFile(
            mode="w",
            prefix="gvz",
            suffix=".dot",
            encoding="utf-8",
            delete=False,
        )
        dot_path = Path(handle.name)

        try:
            with handle:
                handle.write(dot_content)
            return self.render_file(dot_path, output_file, output_format)
        finally:
            dot_path.unlink(missing_ok=True)

    def render_to_bytes(self, dot_content: str, output_format: str) -> bytes:
        """Render DOT content to bytes for in-memory usage.

        Uses the ``graphviz`` package, which looks the engine up on the PATH.

        Args:
            dot_content: DOT language content.
            output_format: Graphviz output format.

        Returns:
            Rendered graph as bytes.
        """
        try:
            source = graphviz.Source(dot_content, engine=self.config.engine)
            return source.pipe(format=output_format)
        except graphviz.ExecutableNotFound as e:
            raise RenderError(f"Graphviz executable not found: {e}") from e
        except graphviz.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", "replace") if isinstance(e.stderr, bytes) else e.stderr
            raise RenderError((stderr or "").strip(), returncode=e.returncode) from e

    def save_dot_file(self, dot_content: str, output_file: Union[str, Path]) -> Path:
        """Save DOT content to a .dot file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.

        Returns:
            Path to the saved DOT file.
        """
        dot_path = Path(output_file)

        # Ensure .dot extension
        if dot_path.suffix.lower() != ".dot":
            dot_path = dot_path.with_suffix(".dot")

        dot_path.write_text(dot_content, encoding="utf-8")
        logger.info(f"DOT file saved to: {dot_path}")

        return dot_path

    def get_available_engines(self) -> List[str]:
        """Get list of available Graphviz layout engines.

        Returns:
            Sorted list of engine names found next to the configured
            executable, or on the PATH.
        """
        available = []

        for engine in sorted(graphviz.ENGINES):
            candidate = str(self.config.path / engine) if self.config.path else engine
            if shutil.which(candidate):
                available.append(engine)

        return available
