# -*- coding: utf-8 -*-
"""
Tests for photodex.core.gallery — gallery state machine and view.

Created
-------
2026-10-19
"""

import pytest

from photodex.catalog.models import MISSING_LOCATOR
from photodex.core.gallery import (
    CLOSED,
    GalleryAction,
    GalleryState,
    handle_key,
    render_gallery,
    transition,
)
from photodex.core.images import resolve_images


def _open(catalog, entity_id):
    return transition(CLOSED, GalleryAction.OPEN, catalog, entity_id)


# ---------------------------------------------------------------------------
# transition
# ---------------------------------------------------------------------------

class TestOpen:
    def test_opens_at_first_resolved_index(self, small_catalog):
        state = _open(small_catalog, '001')
        assert state == GalleryState(entity_id='001', index=0)
        assert state.is_open

    def test_entity_without_images_opens_on_stand_in(self, small_catalog):
        state = _open(small_catalog, '002')
        assert state == GalleryState(entity_id='002', index=0)
        view = render_gallery(state, small_catalog)
        assert view.missing
        assert view.locator == MISSING_LOCATOR
        assert view.caption == 'Ivysaur - missing'
        assert not view.can_navigate

    def test_unknown_entity_stays_closed(self, small_catalog):
        assert _open(small_catalog, '999') == CLOSED


class TestNavigation:
    def test_next_wraps(self, small_catalog):
        state = _open(small_catalog, '003')
        indices = []
        for _ in range(5):
            state = transition(state, GalleryAction.NEXT, small_catalog)
            indices.append(state.index)
        assert indices == [1, 2, 3, 0, 1]

    def test_previous_wraps(self, small_catalog):
        state = _open(small_catalog, '003')
        state = transition(state, GalleryAction.PREVIOUS, small_catalog)
        assert state.index == 3

    @pytest.mark.parametrize("start", [0, 1, 2, 3])
    def test_next_then_previous_round_trip(self, small_catalog, start):
        state = GalleryState(entity_id='003', index=start)
        after = transition(
            transition(state, GalleryAction.NEXT, small_catalog),
            GalleryAction.PREVIOUS, small_catalog,
        )
        assert after == state

    def test_round_trip_over_catalog(self, catalog):
        for entity_id in catalog.ids[:50]:
            state = _open(catalog, entity_id)
            after = transition(
                transition(state, GalleryAction.NEXT, catalog),
                GalleryAction.PREVIOUS, catalog,
            )
            assert after == state

    def test_single_image_is_noop(self, small_catalog):
        state = _open(small_catalog, '001')
        assert transition(state, GalleryAction.NEXT, small_catalog) == state
        assert transition(state, GalleryAction.PREVIOUS, small_catalog) == state

    def test_ignored_while_closed(self, small_catalog):
        assert transition(CLOSED, GalleryAction.NEXT, small_catalog) == CLOSED
        assert transition(CLOSED, GalleryAction.PREVIOUS, small_catalog) == CLOSED

    def test_state_not_mutated(self, small_catalog):
        state = _open(small_catalog, '003')
        transition(state, GalleryAction.NEXT, small_catalog)
        assert state.index == 0


class TestClose:
    @pytest.mark.parametrize("action", [GalleryAction.CLOSE, GalleryAction.BACKDROP_CLICK])
    def test_close_clears_entity(self, small_catalog, action):
        state = transition(_open(small_catalog, '003'), action, small_catalog)
        assert state == CLOSED
        assert not state.is_open


class TestImageFailed:
    def test_failure_shows_stand_in(self, small_catalog):
        state = transition(
            _open(small_catalog, '001'), GalleryAction.IMAGE_FAILED, small_catalog,
        )
        view = render_gallery(state, small_catalog)
        assert view.missing
        assert view.caption == 'Bulbasaur - missing'

    def test_navigation_clears_failure(self, small_catalog):
        state = transition(
            _open(small_catalog, '003'), GalleryAction.IMAGE_FAILED, small_catalog,
        )
        state = transition(state, GalleryAction.NEXT, small_catalog)
        assert not state.failed
        assert not render_gallery(state, small_catalog).missing

    def test_single_image_failure_persists(self, small_catalog):
        state = transition(
            _open(small_catalog, '001'), GalleryAction.IMAGE_FAILED, small_catalog,
        )
        state = transition(state, GalleryAction.NEXT, small_catalog)
        assert state.failed
        assert render_gallery(state, small_catalog).missing


# ---------------------------------------------------------------------------
# keys
# ---------------------------------------------------------------------------

class TestHandleKey:
    def test_arrows_and_escape(self, small_catalog):
        state = _open(small_catalog, '003')
        state, consumed = handle_key(state, 'ArrowRight', small_catalog)
        assert consumed and state.index == 1
        state, consumed = handle_key(state, 'ArrowLeft', small_catalog)
        assert consumed and state.index == 0
        state, consumed = handle_key(state, 'Escape', small_catalog)
        assert consumed and state == CLOSED

    def test_not_consumed_while_closed(self, small_catalog):
        state, consumed = handle_key(CLOSED, 'ArrowRight', small_catalog)
        assert state == CLOSED
        assert not consumed

    def test_other_keys_not_consumed(self, small_catalog):
        state = _open(small_catalog, '003')
        new_state, consumed = handle_key(state, 'a', small_catalog)
        assert new_state == state
        assert not consumed


# ---------------------------------------------------------------------------
# render_gallery
# ---------------------------------------------------------------------------

class TestRenderGallery:
    def test_closed_renders_nothing(self, small_catalog):
        assert render_gallery(CLOSED, small_catalog) is None

    def test_view_fields(self, small_catalog):
        state = GalleryState(entity_id='003', index=2)
        view = render_gallery(state, small_catalog)
        image = resolve_images(small_catalog['003'])[2]
        assert view.locator == image.locator
        assert view.caption == 'Venusaur - Mega'
        assert view.fit == 'cover'
        assert view.background == ''
        assert view.can_navigate
        assert view.counter == '3 / 4'
        assert not view.missing

    def test_contain_gets_black_background(self, small_catalog):
        view = render_gallery(GalleryState(entity_id='001'), small_catalog)
        assert view.fit == 'contain'
        assert view.background == '#000'

    def test_idempotent(self, small_catalog):
        state = GalleryState(entity_id='003', index=1)
        assert render_gallery(state, small_catalog) == render_gallery(state, small_catalog)
