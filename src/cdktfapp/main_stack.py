"""Module for defining the application's Terraform stack using CDKTF.

The stack starts out empty. Providers and resources are declared in
``MainStack.__init__``.
"""

from typing import Optional, Tuple

from cdktf import TerraformLocal, TerraformStack
from constructs import Construct

from ._unpack_tags import tags_as_map


class MainStack(TerraformStack):
    """CDKTF Stack synthesized by the application entry point."""

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        tags: Tuple[Tuple[str, str], ...] = (),
    ) -> None:
        """Initialize the stack.

        Args:
            scope: The parent construct, normally the App.
            id: The stack name.
            tags: Tags for resources in this stack, exposed as the "tags" local.
        """
        super().__init__(scope, id)

        self.tags: Optional[TerraformLocal] = None
        if tags:
            self.tags = TerraformLocal(self, "tags", tags_as_map(tags))

        # define resources here
