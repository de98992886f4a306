"""Adapter from the configuration file schema to domain objects.

The schema is the file and request format; the engines only ever see the
frozen domain ``Configuration`` and the explicit policy and pinned edge.
"""

from patioroof.application.config.schemas import (
    LayoutConfigSchema,
    PatioRoofConfiguration,
    RoofConfigSchema,
)
from patioroof.domain.value_objects import (
    Configuration,
    GridPolicy,
    PinnedEdge,
)


def schema_to_configuration(schema: RoofConfigSchema) -> Configuration:
    """Convert a validated roof schema into the domain configuration.

    Raises:
        ConfigurationError: If the values violate a domain invariant.
    """
    return Configuration(
        frame_color=schema.frame_color,
        width=schema.width,
        depth=schema.depth,
        gutter_height=schema.gutter_height,
        mount_type=schema.mount_type,
        post_length=schema.post_length,
        post_mounting=schema.post_mounting,
        roof_slope=schema.roof_slope,
        delivery_option=schema.delivery_option,
        roof_covering=schema.roof_covering,
        side_panel_left=schema.side_panel_left,
        side_panel_right=schema.side_panel_right,
    )


def schema_to_pinned_edge(layout: LayoutConfigSchema) -> PinnedEdge:
    """Convert the layout settings into the pinned edge parameter."""
    return PinnedEdge(x=layout.pinned_x, back_z=layout.pinned_back_z)


def config_to_domain(
    config: PatioRoofConfiguration,
) -> tuple[Configuration, GridPolicy, PinnedEdge]:
    """Convert a complete configuration file into engine inputs.

    Returns:
        (configuration, grid policy, pinned edge)

    Example:
        >>> config = load_config(Path("my-roof.json"))
        >>> roof, policy, pinned = config_to_domain(config)
        >>> QuoteCommand().execute(roof, policy=policy, pinned_edge=pinned)
    """
    return (
        schema_to_configuration(config.configuration),
        config.pricing.grid_policy,
        schema_to_pinned_edge(config.layout),
    )
