"""
Generation orchestrator.

Fetches content types, renders one model per type and writes the files,
reporting progress to a rich console.
"""

import asyncio
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from .core.config import GenerationConfig
from .core.generator import GeneratedModel, ModelGenerator
from .core.naming import InvalidConfiguration
from .core.schema import ContentTypeSchema
from .delivery.generator import DeliveryModelGenerator
from ..logging_config import get_logger
from ..utils import DeliveryClient

logger = get_logger(__name__)


class GenerationState(Enum):
    """Lifecycle of a generator run."""

    IDLE = "idle"
    FETCHING = "fetching"
    GENERATING = "generating"
    DONE = "done"
    FAILED = "failed"


class Reporter:
    """Console output of a generator run."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def started(self) -> None:
        self.console.print("Kontent model generator started ...")

    def resolver(self, description: str, target: str) -> None:
        self.console.print(
            f"Using '[yellow]{escape(description)}[/yellow]' name resolver for {target}"
        )

    def generated(self, model: GeneratedModel) -> None:
        self.console.print(
            f"[yellow]{escape(model.filename)}[/yellow] ({escape(model.content_type.name)})"
        )

    def failed(self, error: BaseException) -> None:
        self.console.print(f"[red]✗ Generator failed with error:[/red] {escape(str(error))}")

    def finished(self) -> None:
        self.console.print("Generator finished")


class GenerationOrchestrator:
    """Runs one generation pass over all content types."""

    def __init__(
        self,
        config: GenerationConfig,
        reporter: Optional[Reporter] = None,
        client: Optional[DeliveryClient] = None,
        generator: Optional[ModelGenerator] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            config: Generation settings
            reporter: Console reporter, stdout by default
            client: Delivery API client, built from the config when needed
            generator: Model generator, a DeliveryModelGenerator by default
        """
        self.config = config
        self.reporter = reporter or Reporter()
        self.client = client
        self.generator = generator or DeliveryModelGenerator(config)

        self.state = GenerationState.IDLE
        self.current_index: Optional[int] = None

    async def run(
        self, types: Optional[Sequence[ContentTypeSchema]] = None
    ) -> List[GeneratedModel]:
        """
        Generate and write a model for every content type.

        Args:
            types: Content types to use instead of fetching them

        Returns:
            Written models in schema order

        Raises:
            Whatever aborted the run, after the completion line is printed
        """
        written: List[GeneratedModel] = []
        self.reporter.started()

        try:
            if types is None:
                self.state = GenerationState.FETCHING
                types = await self._fetch_types()

            self._report_resolvers()
            output_dir = Path(self.config.output_dir)

            for index, content_type in enumerate(types):
                self.state = GenerationState.GENERATING
                self.current_index = index

                model = self.generator.build(content_type)
                path = self.generator.write(model, output_dir)
                logger.debug("Wrote %s", path)

                self.reporter.generated(model)
                written.append(model)

            self.state = GenerationState.DONE
            return written

        except Exception as e:
            self.state = GenerationState.FAILED
            logger.debug("Generation failed at index %s", self.current_index, exc_info=True)
            self.reporter.failed(e)
            raise
        finally:
            self.reporter.finished()

    async def _fetch_types(self) -> List[ContentTypeSchema]:
        """Retrieve all content types from the Delivery API."""
        client = self.client or self._create_client()
        return await asyncio.to_thread(client.get_types)

    def _create_client(self) -> DeliveryClient:
        if not self.config.project_id:
            raise InvalidConfiguration("project_id is required to fetch content types")

        return DeliveryClient(
            self.config.project_id,
            secure_access_key=self.config.secure_access_key,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
        )

    def _report_resolvers(self) -> None:
        """Print which naming resolvers are active."""
        if self.config.element_resolver:
            self.reporter.resolver(
                self.config.element_resolver.describe(), "content type elements"
            )

        if self.config.file_resolver:
            self.reporter.resolver(self.config.file_resolver.describe(), "filenames")

        if self.config.element_resolver or self.config.file_resolver:
            self.reporter.console.print()


def generate_models(
    config: GenerationConfig,
    types: Optional[Sequence[ContentTypeSchema]] = None,
    console: Optional[Console] = None,
) -> List[GeneratedModel]:
    """
    Run the generator synchronously.

    Args:
        config: Generation settings
        types: Content types to use instead of fetching them
        console: Console for progress output, stdout by default

    Returns:
        Written models in schema order
    """
    orchestrator = GenerationOrchestrator(config, reporter=Reporter(console))
    return asyncio.run(orchestrator.run(types))
