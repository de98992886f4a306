"""Unit tests for the pricing engine."""

import logging

import pytest

from patioroof.domain.services import PricingEngine, compute_price, is_custom_size
from patioroof.domain.services.pricing import (
    CUSTOM_SIZE_SURCHARGE,
    FLAT_COVERING_PRICES,
    FREESTANDING_SURCHARGES,
    MOUNTING_SET_SURCHARGES,
    POST_LENGTH_SURCHARGES,
    POST_MOUNTING_SURCHARGES,
    SIDE_PANEL_SURCHARGES,
)
from patioroof.domain.value_objects import (
    BillingSize,
    Configuration,
    DeliveryOption,
    FrameColor,
    GridPolicy,
    MountType,
    PostLength,
    PostMounting,
    PriceBreakdown,
    RoofCovering,
    RoofSlope,
    SidePanelType,
)


class TestDefaultPrice:
    """Price of the initial configuration."""

    def test_base_and_covering(self, default_config: Configuration) -> None:
        price = compute_price(default_config)

        assert price.base_price == 1204.76
        assert price.roof_covering_price == 330.0
        assert price.total_price == 1534.76

    def test_all_surcharges_zero(self, default_config: Configuration) -> None:
        price = compute_price(default_config)

        assert price.freestanding_price == 0.0
        assert price.post_length_price == 0.0
        assert price.post_mounting_price == 0.0
        assert price.mounting_set_price == 0.0
        assert price.side_panel_left_price == 0.0
        assert price.side_panel_right_price == 0.0
        assert price.custom_size_price == 0.0

    def test_breakdown_is_consistent(self, default_config: Configuration) -> None:
        assert compute_price(default_config).is_consistent


class TestSurcharges:
    """Each option adds exactly its own surcharge."""

    @pytest.mark.parametrize(
        "changes,item,amount",
        [
            ({"mount_type": MountType.FREESTANDING}, "freestanding_price", 981.0),
            ({"post_length": PostLength.MM_3000}, "post_length_price", 90.0),
            ({"post_length": PostLength.MM_3500}, "post_length_price", 180.0),
            ({"post_mounting": PostMounting.ALU_U_3}, "post_mounting_price", 66.0),
            ({"post_mounting": PostMounting.ALU_U_6}, "post_mounting_price", 132.0),
            ({"post_mounting": PostMounting.STEEL_3}, "post_mounting_price", 285.0),
            ({"post_mounting": PostMounting.STEEL_6}, "post_mounting_price", 570.0),
            (
                {"delivery_option": DeliveryOption.WITH_MOUNTING_SET},
                "mounting_set_price",
                105.0,
            ),
            ({"side_panel_left": SidePanelType.WEDGE}, "side_panel_left_price", 1010.0),
            (
                {"side_panel_right": SidePanelType.FULL_WALL},
                "side_panel_right_price",
                2542.0,
            ),
        ],
    )
    def test_single_option_changes_single_item(
        self,
        default_config: Configuration,
        changes: dict,
        item: str,
        amount: float,
    ) -> None:
        baseline = compute_price(default_config)
        price = compute_price(default_config.with_changes(**changes))

        for name, value in price.line_items.items():
            if name == item:
                assert value == amount
            else:
                assert value == baseline.line_items[name]
        assert price.total_price == pytest.approx(baseline.total_price + amount)
        assert price.is_consistent

    @pytest.mark.parametrize(
        "changes",
        [
            {"frame_color": FrameColor.RAL9005ST},
            {"frame_color": FrameColor.RAL9010ST},
            {"roof_slope": RoofSlope.DEG_5},
            {"roof_slope": RoofSlope.DEG_10},
            {"gutter_height": 2000.0},
            {"gutter_height": 2900.0},
        ],
    )
    def test_layout_only_option_leaves_price_unchanged(
        self, default_config: Configuration, changes: dict
    ) -> None:
        assert compute_price(default_config.with_changes(**changes)) == compute_price(
            default_config
        )

    def test_side_panels_priced_per_side(self, default_config: Configuration) -> None:
        config = default_config.with_changes(
            side_panel_left=SidePanelType.FULL_WALL,
            side_panel_right=SidePanelType.FULL_WALL,
        )
        price = compute_price(config)

        assert price.side_panel_left_price == 2542.0
        assert price.side_panel_right_price == 2542.0
        assert price.total_price == pytest.approx(1534.76 + 2 * 2542.0)

    def test_surcharge_tables_cover_every_option(self) -> None:
        assert set(FREESTANDING_SURCHARGES) == set(MountType)
        assert set(POST_LENGTH_SURCHARGES) == set(PostLength)
        assert set(POST_MOUNTING_SURCHARGES) == set(PostMounting)
        assert set(MOUNTING_SET_SURCHARGES) == set(DeliveryOption)
        assert set(SIDE_PANEL_SURCHARGES) == set(SidePanelType)

    def test_surcharge_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            FREESTANDING_SURCHARGES[MountType.WALL] = 1.0  # type: ignore[index]


class TestRoofCovering:
    """Covering prices by family."""

    def test_opal_and_clear_share_the_grid(self, default_config: Configuration) -> None:
        opal = compute_price(
            default_config.with_changes(roof_covering=RoofCovering.POLYCARBONATE_OPAL)
        )
        clear = compute_price(default_config)

        assert opal.roof_covering_price == clear.roof_covering_price == 330.0

    def test_reflex_pearl_adds_ir_gold(self, default_config: Configuration) -> None:
        price = compute_price(
            default_config.with_changes(
                roof_covering=RoofCovering.POLYCARBONATE_REFLEX_PEARL
            )
        )
        assert price.roof_covering_price == 435.0

    @pytest.mark.parametrize("covering", [RoofCovering.VSG_CLEAR, RoofCovering.VSG_MATT])
    @pytest.mark.parametrize("width", [3000.0, 6000.0])
    def test_glass_is_flat_priced(self, covering: RoofCovering, width: float) -> None:
        price = compute_price(Configuration(width=width, roof_covering=covering))
        assert price.roof_covering_price == FLAT_COVERING_PRICES[covering]

    def test_covering_price_grows_with_size(self) -> None:
        small = compute_price(Configuration(width=3000.0, depth=2000.0))
        large = compute_price(Configuration(width=6000.0, depth=3500.0))

        assert small.roof_covering_price == 132.0
        assert large.roof_covering_price == 462.0


class TestCustomSize:
    """Non-standard sizes are billed at the next grid node plus a surcharge."""

    @pytest.mark.parametrize(
        "width,depth,expected",
        [
            (5000.0, 3000.0, False),
            (3000.0, 2000.0, False),
            (4500.0, 3000.0, True),
            (5000.0, 2750.0, True),
            (1000.0, 1000.0, True),
        ],
    )
    def test_is_custom_size(self, width: float, depth: float, expected: bool) -> None:
        assert is_custom_size(width, depth) is expected

    def test_rounds_up_to_next_node(self) -> None:
        price = compute_price(Configuration(width=4500.0, depth=2750.0))

        assert price.base_price == 1204.76
        assert price.roof_covering_price == 330.0
        assert price.custom_size_price == CUSTOM_SIZE_SURCHARGE
        assert price.total_price == 1634.76

    def test_maximum_width_clamps_to_last_column(self) -> None:
        price = compute_price(Configuration(width=7060.0))

        assert price.base_price == 1333.89
        assert price.roof_covering_price == 396.0
        assert price.custom_size_price == 100.0
        assert price.total_price == 1829.89

    def test_small_depth_clamps_to_first_row(self) -> None:
        price = compute_price(Configuration(depth=1000.0))

        assert price.base_price == 1004.76
        assert price.custom_size_price == 100.0

    def test_billing_size(self) -> None:
        engine = PricingEngine()

        assert engine.billing_size(Configuration(width=4500.0, depth=2750.0)) == BillingSize(
            5000.0, 3000.0
        )
        assert engine.billing_size(Configuration(width=1000.0, depth=1000.0)) == BillingSize(
            3000.0, 2000.0
        )

    def test_out_of_grid_size_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="patioroof.domain.services.pricing"):
            compute_price(Configuration(width=7060.0))

        assert "outside the billing grid" in caplog.text

    def test_billing_size_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="patioroof.domain.services.pricing"):
            size = PricingEngine().billing_size(Configuration(width=7060.0))

        assert size == BillingSize(6000.0, 3000.0)
        assert caplog.records == []

    def test_in_grid_size_logs_nothing(
        self, default_config: Configuration, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="patioroof.domain.services.pricing"):
            compute_price(default_config)

        assert caplog.records == []


class TestBilinearPolicy:
    """Interpolated grid lookups."""

    def test_interpolates_between_nodes(self) -> None:
        config = Configuration(width=4500.0, depth=2750.0)
        price = compute_price(config, GridPolicy.BILINEAR)

        assert price.base_price == pytest.approx(1057.975, abs=0.01)
        assert price.roof_covering_price == pytest.approx(272.25)
        assert price.custom_size_price == 100.0
        assert price.is_consistent

    def test_matches_snap_on_grid_nodes(self, default_config: Configuration) -> None:
        snap = compute_price(default_config, GridPolicy.SNAP)
        bilinear = compute_price(default_config, GridPolicy.BILINEAR)

        assert snap == bilinear

    def test_engine_carries_policy(self) -> None:
        engine = PricingEngine(policy=GridPolicy.BILINEAR)
        config = Configuration(width=3500.0)

        assert engine.compute_price(config) == compute_price(config, GridPolicy.BILINEAR)


class TestPriceBreakdown:
    """Breakdown structure and rounding."""

    def test_line_items_order(self, default_config: Configuration) -> None:
        price = compute_price(default_config)

        assert list(price.line_items) == [
            "base_price",
            "roof_covering_price",
            "freestanding_price",
            "post_length_price",
            "post_mounting_price",
            "mounting_set_price",
            "side_panel_left_price",
            "side_panel_right_price",
            "custom_size_price",
        ]

    def test_to_dict_includes_total(self, default_config: Configuration) -> None:
        data = compute_price(default_config).to_dict()

        assert data["total_price"] == 1534.76
        assert len(data) == 10

    def test_inconsistent_breakdown_detected(self) -> None:
        breakdown = PriceBreakdown(
            base_price=100.0,
            roof_covering_price=50.0,
            freestanding_price=0.0,
            post_length_price=0.0,
            post_mounting_price=0.0,
            mounting_set_price=0.0,
            side_panel_left_price=0.0,
            side_panel_right_price=0.0,
            custom_size_price=0.0,
            total_price=149.0,
        )
        assert not breakdown.is_consistent

    def test_every_item_in_cents(self) -> None:
        config = Configuration(
            width=3333.0,
            depth=2222.0,
            roof_covering=RoofCovering.POLYCARBONATE_REFLEX_PEARL,
        )
        price = compute_price(config, GridPolicy.BILINEAR)

        for value in price.to_dict().values():
            assert round(value, 2) == value


class TestIdempotence:
    """Pricing is a pure function of the configuration."""

    def test_same_input_same_price(self) -> None:
        config = Configuration(
            width=4321.0,
            mount_type=MountType.FREESTANDING,
            side_panel_left=SidePanelType.WEDGE,
        )
        assert compute_price(config) == compute_price(config)
