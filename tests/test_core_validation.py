# -*- coding: utf-8 -*-
"""
Tests for photodex.core.validation — catalog integrity checks.

Created
-------
2026-10-19
"""

import copy

import pytest

from photodex.core.validation import (
    DEFAULT_SPOT_CHECKS,
    DiscrepancyKind,
    validate_document,
)


@pytest.fixture
def full_document(document_factory):
    return document_factory()


class TestValidateDocument:
    def test_valid_document_passes(self, full_document):
        report = validate_document(full_document)
        assert report.ok
        assert report.exit_code == 0
        assert report.checked == 1025

    def test_missing_500(self, full_document):
        del full_document['500']
        report = validate_document(full_document)
        missing = report.of_kind(DiscrepancyKind.MISSING)
        assert len(missing) == 1
        assert missing[0].entity_id == '500'
        assert not report.ok
        assert report.exit_code == 1

    def test_count_mismatch(self, full_document):
        del full_document['500']
        report = validate_document(full_document)
        count = report.of_kind(DiscrepancyKind.COUNT)
        assert len(count) == 1
        assert "got 1024" in count[0].message

    def test_extension_gap_reported(self, full_document):
        full_document['1027'] = {'name': 'Extra', 'variants': []}
        report = validate_document(full_document)
        assert [d.entity_id for d in report.of_kind(DiscrepancyKind.MISSING)] == ['1026']

    def test_stray_key_reports_one_run(self, full_document):
        full_document['100000000'] = {'name': 'Stray', 'variants': []}
        missing = validate_document(full_document).of_kind(DiscrepancyKind.MISSING)
        assert len(missing) == 1
        assert missing[0].entity_id == '1026'
        assert missing[0].message == "Missing entries: 1026..99999999"

    def test_extension_runs_reported_separately(self, full_document):
        for key in ('1027', '1030'):
            full_document[key] = {'name': 'Extra', 'variants': []}
        missing = validate_document(full_document).of_kind(DiscrepancyKind.MISSING)
        assert [d.entity_id for d in missing] == ['1026', '1028']

    def test_extension_range_accepted(self, full_document):
        full_document['1026'] = {'name': 'Extra', 'variants': []}
        report = validate_document(full_document, expected_count=1026)
        assert report.ok

    def test_unpadded_key_is_a_gap(self, full_document):
        full_document['7'] = full_document.pop('007')
        missing = validate_document(full_document).of_kind(DiscrepancyKind.MISSING)
        assert [d.entity_id for d in missing] == ['007']

    def test_duplicate_variant_labels(self, full_document):
        full_document['010']['variants'] = [
            {'label': 'Base', 'image': 'a.png'},
            {'label': 'Base', 'image': 'b.png'},
        ]
        dupes = validate_document(full_document).of_kind(DiscrepancyKind.DUPLICATE_LABEL)
        assert len(dupes) == 1
        assert dupes[0].entity_id == '010'
        assert 'Base' in dupes[0].message

    def test_non_string_labels_are_reported(self, full_document):
        full_document['010']['variants'] = [
            {'label': ['Base'], 'image': 'a.png'},
            {'label': ['Base'], 'image': 'b.png'},
            {'label': {'form': 'Alt'}, 'image': 'c.png'},
        ]
        report = validate_document(full_document)
        dupes = report.of_kind(DiscrepancyKind.DUPLICATE_LABEL)
        assert [d.entity_id for d in dupes] == ['010']
        assert report.exit_code == 1

    def test_single_list_label_is_not_fatal(self, full_document):
        full_document['010']['variants'] = [{'label': ['Base'], 'image': 'a.png'}]
        assert validate_document(full_document).ok

    def test_entries_without_variants_pass_duplicate_check(self, full_document):
        del full_document['010']['variants']
        assert validate_document(full_document).ok

    def test_unicode_name_exact_equality(self, full_document):
        assert full_document['029']['name'] == 'Nidoran♀'
        full_document['029']['name'] = 'Nidoran F'
        mismatches = validate_document(full_document).of_kind(DiscrepancyKind.NAME_MISMATCH)
        assert [d.entity_id for d in mismatches] == ['029']

    def test_spot_check_key_absent_is_skipped(self, document_factory):
        data = document_factory(count=10)
        report = validate_document(data, expected_count=10)
        assert report.ok

    def test_custom_spot_checks(self, full_document):
        report = validate_document(full_document, spot_checks={'002': 'Ivysaur'})
        assert len(report.of_kind(DiscrepancyKind.NAME_MISMATCH)) == 1

    def test_document_not_mutated(self, full_document):
        del full_document['500']
        before = copy.deepcopy(full_document)
        validate_document(full_document)
        assert full_document == before

    def test_default_spot_checks_cover_known_names(self):
        assert DEFAULT_SPOT_CHECKS['122'] == 'Mr. Mime'
        assert DEFAULT_SPOT_CHECKS['032'] == 'Nidoran♂'
        assert DEFAULT_SPOT_CHECKS['1025'] == 'Pecharunt'
