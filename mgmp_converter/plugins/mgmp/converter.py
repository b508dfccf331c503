import datetime
import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

import pytz

from mgmp_converter.core.common.base_converter import BaseTreeConverter
from mgmp_converter.core.path import substitute_index
from mgmp_converter.core.pipeline import MappingPipeline, StepResult, add_field_if_present
from mgmp_converter.core.tracker import PathValueTracker
from mgmp_converter.exceptions import GeometryParseError
from mgmp_converter.models.record import SourceRecord
from mgmp_converter.models.settings import ConverterSettings
from mgmp_converter.models.taxonomy import (
    Associations,
    Contact,
    Core,
    DateTime,
    Extension,
    Isr,
    Location,
    Media,
    Security,
    Topic,
)

from . import constants as c
from .classification import (
    ClassificationCode,
    SecurityMapping,
    classification_chain,
    first_resolved,
    originator_classification_chain,
)
from .context import ConversionContext, generate_gml_id
from .derivations import (
    bounding_box_from_wkt,
    compose_caveat,
    date_to_iso8601,
    display_language,
    format_bbox_coordinate,
    format_decimal,
    format_id,
    pair_temporal_extents,
)

logger = logging.getLogger(__name__)

SECURITY_MAPPING_LIST_KEY = "securityMappingList"
SOURCE_SYSTEM_NAME_KEY = "sourceSystemName"

_CRS_FILTER = re.compile(c.CRS_CODE_PATTERN)


class MgmpConverter(BaseTreeConverter):
    """
    Converts a source record into an MGMP 2.0 document.

    The mapping is an ordered pipeline of steps. Order matters: paths are
    written to the document in the order they are first added. Each call to
    build_paths() uses a fresh ConversionContext, but a single instance must
    not serve overlapping conversions.
    """

    def __init__(self, settings: ConverterSettings | None = None):
        super().__init__()
        self._settings = settings or ConverterSettings()
        self._security_mapping = SecurityMapping.from_list(
            self._settings.security_mapping_list
        )
        self._source_system_name = self._settings.source_system_name
        self._gml_id_supplier: Callable[[], str] = generate_gml_id
        self._pipeline = self._create_pipeline()

    # --- Configuration ---

    def refresh(self, properties: Mapping[str, Any]) -> None:
        """
        Update configuration from a properties mapping.

        A non-empty ``securityMappingList`` replaces the security mapping;
        ``sourceSystemName`` is always applied, so a missing key clears it.
        """
        self._logger.debug(f"refresh called {dict(properties)}")
        mapping_list = properties.get(SECURITY_MAPPING_LIST_KEY)
        if mapping_list:
            self.set_security_mapping_list(list(mapping_list))
        self.set_source_system_name(properties.get(SOURCE_SYSTEM_NAME_KEY))

    def set_security_mapping_list(self, entries: list[str]) -> None:
        self._logger.debug("Setting security mapping list")
        self._security_mapping = SecurityMapping.from_list(entries)

    def get_security_mapping_list(self) -> list[str]:
        return self._security_mapping.to_list()

    @property
    def security_mapping(self) -> SecurityMapping:
        return self._security_mapping

    def set_source_system_name(self, name: str | None) -> None:
        self._source_system_name = name

    def set_gml_id_supplier(self, supplier: Callable[[], str]) -> None:
        """Replace the gml:id generator, e.g. for deterministic output."""
        self._gml_id_supplier = supplier

    # --- BaseTreeConverter ---

    def root_node_name(self) -> str:
        return c.ROOT_NODE_NAME

    def build_paths(self, record: SourceRecord) -> PathValueTracker:
        """
        Builds up the paths and values to write, in document order.

        Args:
            record: The record to convert.

        Returns:
            Tracker containing the ordered (path, value) assignments
        """
        context = ConversionContext(gml_id_supplier=self._gml_id_supplier)
        return self._pipeline.run(record, PathValueTracker(), context)

    def get_step_names(self) -> list[str]:
        return self._pipeline.get_step_names()

    def _create_pipeline(self) -> MappingPipeline:
        return (
            MappingPipeline()
            .add_step("namespaces", self._add_namespaces)
            .add_step("file_identifier", self._add_file_identifier)
            .add_step("language", self._add_language)
            .add_step("character_set", self._add_character_set)
            .add_step("hierarchy_level", self._add_hierarchy_level)
            .add_step("contact", self._add_contact)
            .add_step("date_stamp", self._add_date_stamp)
            .add_step("metadata_standard", self._add_metadata_standard)
            .add_step("crs", self._add_crs)
            .add_step("citation", self._add_citation)
            .add_step("abstract", self._add_abstract)
            .add_step("status", self._add_status)
            .add_step("point_of_contact", self._add_point_of_contact)
            .add_step("descriptive_keywords", self._add_descriptive_keywords)
            .add_step("resource_constraints", self._add_resource_constraints)
            .add_step("aggregation_info", self._add_aggregation_info)
            .add_step("identification_language", self._add_identification_language)
            .add_step("topic_categories", self._add_topic_categories)
            .add_step("geographic_identifier", self._add_geographic_identifier)
            .add_step("bounding_polygon", self._add_bounding_polygon)
            .add_step("temporal_elements", self._add_temporal_elements)
            .add_step("vertical_element", self._add_vertical_element)
            .add_step("image_description", self._add_image_description)
            .add_step("distribution_info", self._add_distribution_info)
            .add_step("metadata_constraints", self._add_metadata_constraints)
        )

    # --- Record-level steps ---

    def _add_namespaces(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        tracker.add(c.GMD_NAMESPACE_PATH, c.GMD_NAMESPACE)
        tracker.add(c.GCO_NAMESPACE_PATH, c.GCO_NAMESPACE)
        tracker.add(c.MGMP_NAMESPACE_PATH, c.MGMP_NAMESPACE)
        tracker.add(c.GML_NAMESPACE_PATH, c.GML_NAMESPACE)
        tracker.add(c.XLINK_NAMESPACE_PATH, c.XLINK_NAMESPACE)

    def _add_file_identifier(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        identifier = record.get_string(Core.ID) or ""
        add_field_if_present(tracker, format_id(identifier), c.FILE_IDENTIFIER_PATH)

    def _add_language(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        record_language = record.get_string(Core.LANGUAGE)
        language = (record_language or self._settings.default_language).lower()

        tracker.add(c.LANGUAGE_CODE_LIST_PATH, c.LANGUAGE_CODE_LIST)
        tracker.add(c.LANGUAGE_CODE_LIST_VALUE_PATH, language)
        tracker.add(c.LANGUAGE_CODE_PATH, display_language(language))

    def _add_character_set(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        tracker.add(c.CHARACTER_SET_CODE_LIST_PATH, c.MGMP_CHARACTER_SET_CODE)
        tracker.add(c.CHARACTER_SET_CODE_LIST_VALUE_PATH, c.ENCODING_TYPE)
        tracker.add(c.CHARACTER_SET_TEXT_PATH, c.ENCODING_DESCRIPTION)

    def _add_hierarchy_level(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        tracker.add(c.HIERARCHY_LEVEL_CODE_LIST_VALUE_PATH, c.HIERARCHY_LEVEL)
        tracker.add(c.HIERARCHY_LEVEL_CODE_LIST_PATH, c.MGMP_SCOPE_CODE)

    def _add_contact(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        add_field_if_present(
            tracker,
            record.get_string(Contact.PUBLISHER_NAME),
            c.CONTACT_ORGANISATION_PATH,
        )
        tracker.add_multi(record.get_strings(Contact.PUBLISHER_PHONE), c.CONTACT_PHONE_PATH)
        tracker.add_multi(
            record.get_strings(Contact.PUBLISHER_ADDRESS), c.CONTACT_ADDRESS_PATH
        )
        tracker.add_multi(record.get_strings(Contact.PUBLISHER_EMAIL), c.CONTACT_EMAIL_PATH)

        tracker.add(c.CONTACT_ROLE_CODE_LIST_PATH, c.MGMP_ROLE_CODE)
        tracker.add(c.CONTACT_ROLE_CODE_LIST_VALUE_PATH, "pointOfContact")
        tracker.add(c.CONTACT_ROLE_TEXT_PATH, "Point of Contact")

    def _add_date_stamp(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        stamp = (
            record.get_date(Core.METACARD_MODIFIED)
            or record.get_date(Core.METACARD_CREATED)
            or datetime.datetime.now(pytz.utc)
        )
        tracker.add(c.DATE_STAMP_PATH, date_to_iso8601(stamp))

    def _add_metadata_standard(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        tracker.add(c.METADATA_STANDARD_NAME_PATH, c.METADATA_STANDARD_NAME)
        tracker.add(c.METADATA_STANDARD_VERSION_PATH, c.METADATA_STANDARD_VERSION)

    def _add_crs(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        valid_codes = [
            value
            for value in record.get_strings(Location.COORDINATE_REFERENCE_SYSTEM_CODE)
            if _CRS_FILTER.match(value)
        ]
        tracker.add_multi(
            [value.split(":")[1] for value in valid_codes], c.CRS_CODE_PATH
        )
        tracker.add_multi(
            [value.split(":")[0] for value in valid_codes], c.CRS_AUTHORITY_PATH
        )

    # --- Identification: citation ---

    def _add_citation(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        add_field_if_present(tracker, record.get_string(Core.TITLE) or "", c.TITLE_PATH)

        self._add_citation_date(record, tracker, ctx, Core.MODIFIED, c.LAST_UPDATE)
        self._add_citation_date(record, tracker, ctx, Core.CREATED, c.CREATION)
        self._add_citation_date(record, tracker, ctx, Core.EXPIRATION, c.EXPIRY)
        self._add_citation_date(
            record, tracker, ctx, Extension.PUBLISHED_DATE, c.PUBLICATION
        )

        created = record.get_date(Core.CREATED)
        if created is not None:
            tracker.add(c.EDITION_DATE_PATH, date_to_iso8601(created))

        self._add_citation_identifiers(record, tracker, ctx)

    def _add_citation_date(
        self,
        record: SourceRecord,
        tracker: PathValueTracker,
        ctx: ConversionContext,
        attribute: str,
        date_type: tuple[str, str],
    ) -> StepResult:
        value = record.get_date(attribute)
        if value is None:
            return StepResult.SKIPPED

        def add_date_type() -> None:
            code_list_value, text = date_type
            index = ctx.date_element_index
            tracker.add(substitute_index(c.DATE_TYPE_CODE_VALUE_PATH, index), code_list_value)
            tracker.add(
                substitute_index(c.DATE_TYPE_CODE_LIST_PATH, index), c.MGMP_DATE_TYPE_CODE
            )
            tracker.add(substitute_index(c.DATE_TYPE_CODE_TEXT_PATH, index), text)
            ctx.date_element_index += 1

        return add_field_if_present(
            tracker,
            date_to_iso8601(value),
            substitute_index(c.CITATION_DATE_PATH, ctx.date_element_index),
            add_date_type,
        )

    def _add_citation_identifiers(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        identifier = record.get_string(Core.ID)
        formatted = format_id(identifier) if identifier is not None else None

        self._add_citation_identifier(tracker, ctx, formatted, c.UUID_CODE_SPACE)
        self._add_citation_identifier(
            tracker, ctx, formatted, c.SOURCE_SYSTEM_ID_CODE_SPACE
        )

        source_name = self._source_system_name
        if not source_name or not source_name.strip():
            source_name = record.source_id
        if source_name and source_name.strip():
            self._add_citation_identifier(
                tracker, ctx, source_name, c.SOURCE_SYSTEM_NAME_CODE_SPACE
            )

    def _add_citation_identifier(
        self,
        tracker: PathValueTracker,
        ctx: ConversionContext,
        code: str | None,
        code_space: str,
    ) -> StepResult:
        def add_code_space() -> None:
            tracker.add(
                substitute_index(
                    c.CITATION_IDENTIFIER_CODE_SPACE_PATH, ctx.data_identification_index
                ),
                code_space,
            )
            ctx.data_identification_index += 1

        return add_field_if_present(
            tracker,
            code,
            substitute_index(
                c.CITATION_IDENTIFIER_CODE_PATH, ctx.data_identification_index
            ),
            add_code_space,
        )

    # --- Identification: descriptive fields ---

    def _add_abstract(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        add_field_if_present(
            tracker, record.get_string(Core.DESCRIPTION) or "", c.ABSTRACT_PATH
        )

    def _add_status(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        if record.has(Extension.RESOURCE_STATUS):
            status = record.get_string(Extension.RESOURCE_STATUS)
            if not status:
                return
        else:
            status = c.DEFAULT_RESOURCE_STATUS

        tracker.add(c.RESOURCE_STATUS_CODE_LIST_VALUE_PATH, status)
        tracker.add(c.RESOURCE_STATUS_CODE_LIST_PATH, c.MGMP_PROGRESS_CODE)
        tracker.add(c.RESOURCE_STATUS_TEXT_PATH, status)

    def _add_point_of_contact(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        add_field_if_present(
            tracker,
            record.get_string(Contact.POINT_OF_CONTACT_NAME),
            c.POINT_OF_CONTACT_NAME_PATH,
        )
        tracker.add_multi(
            record.get_strings(Contact.POINT_OF_CONTACT_PHONE),
            c.POINT_OF_CONTACT_PHONE_PATH,
        )
        tracker.add_multi(
            record.get_strings(Contact.POINT_OF_CONTACT_ADDRESS),
            c.POINT_OF_CONTACT_ADDRESS_PATH,
        )
        tracker.add_multi(
            record.get_strings(Contact.POINT_OF_CONTACT_EMAIL),
            c.POINT_OF_CONTACT_EMAIL_PATH,
        )

        tracker.add(c.POINT_OF_CONTACT_ROLE_CODE_LIST_PATH, c.MGMP_ROLE_CODE)
        tracker.add(c.POINT_OF_CONTACT_ROLE_CODE_LIST_VALUE_PATH, "originator")
        tracker.add(c.POINT_OF_CONTACT_ROLE_TEXT_PATH, "Originator")

    def _add_descriptive_keywords(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        keywords = record.get_strings(Topic.KEYWORD)
        if keywords:
            tracker.add_multi(keywords, c.KEYWORD_PATH)
        else:
            tracker.add(c.EMPTY_KEYWORDS_PATH, "")

    # --- Identification: constraints ---

    def _add_resource_constraints(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        index = ctx.resource_constraints_index

        self._add_classification(
            tracker,
            first_resolved(
                classification_chain(
                    Security.RESOURCE_CLASSIFICATION, self._security_mapping
                ),
                record,
            ),
            substitute_index(c.RESOURCE_SECURITY_CODE_LIST_PATH, index),
            substitute_index(c.RESOURCE_SECURITY_CODE_LIST_VALUE_PATH, index),
            substitute_index(c.RESOURCE_SECURITY_CLASSIFICATION_PATH, index),
        )
        self._add_classification(
            tracker,
            first_resolved(
                originator_classification_chain(
                    Security.RESOURCE_ORIGINATOR_CLASSIFICATION
                ),
                record,
            ),
            substitute_index(c.RESOURCE_ORIGINATOR_SECURITY_CODE_LIST_PATH, index),
            substitute_index(c.RESOURCE_ORIGINATOR_SECURITY_CODE_LIST_VALUE_PATH, index),
            substitute_index(c.RESOURCE_ORIGINATOR_SECURITY_PATH, index),
        )
        caveat = compose_caveat(
            record.get_value(Security.RESOURCE_DISSEMINATION),
            record.get_values(Security.RESOURCE_RELEASABILITY),
        )
        add_field_if_present(
            tracker,
            caveat,
            substitute_index(c.RESOURCE_SECURITY_RELEASABILITY_PATH, index),
        )
        ctx.resource_constraints_index += 1

        tracker.add(
            substitute_index(c.USE_LIMITATIONS_PATH, ctx.resource_constraints_index),
            c.DEFAULT_USE_LIMITATION,
        )
        ctx.resource_constraints_index += 1

        tracker.add(
            substitute_index(c.LEGAL_CONSTRAINTS_PATH, ctx.resource_constraints_index),
            c.DEFAULT_OTHER_CONSTRAINTS,
        )
        ctx.resource_constraints_index += 1

    @staticmethod
    def _add_classification(
        tracker: PathValueTracker,
        code: ClassificationCode | None,
        code_list_path: str,
        code_list_value_path: str,
        text_path: str,
    ) -> StepResult:
        if code is None:
            return StepResult.SKIPPED
        tracker.add(code_list_path, code.code_list)
        tracker.add(code_list_value_path, code.value)
        tracker.add(text_path, code.label)
        return StepResult.WRITTEN

    # --- Identification: aggregation, language, topics ---

    def _add_aggregation_info(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        related = record.get_string(Associations.RELATED)

        def add_association_type() -> None:
            tracker.add(c.ASSOCIATIONS_RELATED_CODE_SPACE_PATH, c.RELATED_CODE_SPACE)
            tracker.add(
                c.ASSOCIATIONS_RELATED_TYPE_CODE_LIST_PATH, c.MGMP_ASSOCIATION_TYPE_CODE
            )
            tracker.add(
                c.ASSOCIATIONS_RELATED_TYPE_CODE_LIST_VALUE_PATH, "mediaAssociation"
            )
            tracker.add(c.ASSOCIATIONS_RELATED_TYPE_TEXT_PATH, "Media Association")

        add_field_if_present(
            tracker,
            format_id(related) if related is not None else None,
            c.ASSOCIATION_PATH,
            add_association_type,
        )

    def _add_identification_language(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        languages = record.get_strings(Core.LANGUAGE) or [
            self._settings.default_language
        ]

        tracker.add_multi(
            [c.LANGUAGE_CODE_LIST] * len(languages),
            c.IDENTIFICATION_LANGUAGE_CODE_LIST_PATH,
        )
        tracker.add_multi(languages, c.IDENTIFICATION_LANGUAGE_CODE_LIST_VALUE_PATH)
        tracker.add_multi(
            [display_language(language) for language in languages],
            c.IDENTIFICATION_LANGUAGE_TEXT_PATH,
        )

    def _add_topic_categories(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        topics = record.get_strings(Topic.CATEGORY)
        if topics:
            tracker.add_multi(topics, c.TOPIC_CATEGORY_PATH)
        else:
            tracker.add(c.EMPTY_TOPIC_CATEGORY_PATH, "")

    # --- Identification: extent ---

    def _add_geographic_identifier(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        country_codes = record.get_strings(Location.COUNTRY_CODE)
        tracker.add_multi(
            country_codes, c.COUNTRY_CODE_PATH, ctx.geographic_element_index
        )
        tracker.add_multi(
            [c.COUNTRY_CODE_SPACE] * len(country_codes),
            c.COUNTRY_CODE_SPACE_PATH,
            ctx.geographic_element_index,
        )
        ctx.geographic_element_index += len(country_codes)

    def _add_bounding_polygon(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        location = record.get_string(Core.LOCATION)
        bbox_paths = (
            c.WEST_BOUND_LONGITUDE_PATH,
            c.EAST_BOUND_LONGITUDE_PATH,
            c.SOUTH_BOUND_LATITUDE_PATH,
            c.NORTH_BOUND_LATITUDE_PATH,
        )

        if not location:
            # no location: emit the bounding box elements with empty content
            for path in bbox_paths:
                tracker.add(
                    substitute_index(
                        path.removesuffix(c.BBOX_DECIMAL_SUFFIX),
                        ctx.geographic_element_index,
                    ),
                    "",
                )
            return

        try:
            bbox = bounding_box_from_wkt(location)
        except GeometryParseError as e:
            self._logger.debug(f"unable to set location: wkt={location}: {e}")
            return

        index = ctx.geographic_element_index
        tracker.add(substitute_index(c.POLYGON_GML_ID_PATH, index), ctx.next_gml_id())
        tracker.add(
            substitute_index(c.POLYGON_SRS_NAME_PATH, index), self._settings.gml_srs_name
        )
        tracker.add(substitute_index(c.BOUNDING_POLYGON_PATH, index), bbox.pos_list())
        ctx.geographic_element_index += 1

        if not bbox.is_complete:
            return

        bounds = (bbox.west, bbox.east, bbox.south, bbox.north)
        for path, value in zip(bbox_paths, bounds):
            tracker.add(
                substitute_index(path, ctx.geographic_element_index),
                format_bbox_coordinate(value),
            )
        ctx.geographic_element_index += 1

    def _add_temporal_elements(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        starts = [date_to_iso8601(value) for value in record.get_dates(DateTime.START)]
        ends = [date_to_iso8601(value) for value in record.get_dates(DateTime.END)]

        for extent in pair_temporal_extents(starts, ends):
            if extent.is_instant:
                tracker.add(
                    substitute_index(c.TEMPORAL_TIME_INSTANT_ID_PATH, extent.index),
                    ctx.next_gml_id(),
                )
                tracker.add(
                    substitute_index(c.TEMPORAL_INSTANT_PATH, extent.index), extent.start
                )
            else:
                tracker.add(
                    substitute_index(c.TEMPORAL_TIME_PERIOD_ID_PATH, extent.index),
                    ctx.next_gml_id(),
                )
                tracker.add(
                    substitute_index(c.TEMPORAL_START_PATH, extent.index), extent.start
                )
                tracker.add(
                    substitute_index(c.TEMPORAL_END_PATH, extent.index), extent.end
                )

    def _add_vertical_element(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        altitudes = record.get_numbers(Location.ALTITUDE)
        if not altitudes:
            return

        tracker.add(c.MIN_ALTITUDE_PATH, format_decimal(min(altitudes)))
        tracker.add(c.MAX_ALTITUDE_PATH, format_decimal(max(altitudes)))
        tracker.add(c.VERTICAL_CRS_XLINK_HREF_PATH, c.VERTICAL_CRS_HREF)
        tracker.add(c.VERTICAL_CRS_XLINK_TITLE_PATH, c.VERTICAL_CRS_TITLE)

    # --- Content information ---

    def _add_image_description(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        cloud_cover = record.get_value(Isr.CLOUD_COVER)
        has_cloud_cover = (
            isinstance(cloud_cover, int)
            and not isinstance(cloud_cover, bool)
            and c.MIN_CLOUD_COVERAGE <= cloud_cover <= c.MAX_CLOUD_COVERAGE
        )
        ratings = record.get_values(Isr.NATIONAL_IMAGERY_INTERPRETABILITY_RATING_SCALE)
        has_single_rating = len(ratings) == 1

        if (has_cloud_cover or has_single_rating) and record.has(Isr.COMMENTS):
            comments = record.get_strings(Isr.COMMENTS)
            if len(comments) == 1:
                tracker.add(c.IMAGE_COMMENT_PATH, comments[0])
            else:
                tracker.add(c.IMAGE_COMMENT_NIL_REASON_PATH, "unknown")

            tracker.add(c.IMAGE_CONTENT_TYPE_TEXT_PATH, "Image")
            tracker.add(
                c.IMAGE_CONTENT_TYPE_CODE_LIST_PATH, c.MGMP_COVERAGE_CONTENT_TYPE_CODE
            )
            tracker.add(c.IMAGE_CONTENT_TYPE_CODE_LIST_VALUE_PATH, "image")

        if ratings:
            tracker.add(c.NIIRS_RATING_PATH, c.NIIRS)
            tracker.add(c.NIIRS_PATH, str(ratings[0]))

        if has_cloud_cover:
            tracker.add(c.CLOUD_COVERAGE_PATH, str(cloud_cover))

    # --- Distribution ---

    def _add_distribution_info(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        add_field_if_present(tracker, record.get_string(Media.FORMAT), c.FORMAT_PATH)
        add_field_if_present(
            tracker, record.get_string(Media.FORMAT_VERSION), c.FORMAT_VERSION_PATH
        )
        add_field_if_present(
            tracker,
            record.get_string(Core.RESOURCE_DOWNLOAD_URL),
            c.LINKAGE_URI_PATH,
        )

    # --- Metadata constraints ---

    def _add_metadata_constraints(
        self, record: SourceRecord, tracker: PathValueTracker, ctx: ConversionContext
    ) -> None:
        self._add_classification(
            tracker,
            first_resolved(
                classification_chain(
                    Security.METADATA_CLASSIFICATION, self._security_mapping
                ),
                record,
            ),
            c.METADATA_SECURITY_CODE_LIST_PATH,
            c.METADATA_SECURITY_CODE_LIST_VALUE_PATH,
            c.METADATA_SECURITY_CLASSIFICATION_PATH,
        )
        self._add_classification(
            tracker,
            first_resolved(
                originator_classification_chain(
                    Security.METADATA_ORIGINATOR_CLASSIFICATION
                ),
                record,
            ),
            c.METADATA_ORIGINATOR_CLASSIFICATION_CODE_LIST_PATH,
            c.METADATA_ORIGINATOR_CLASSIFICATION_CODE_LIST_VALUE_PATH,
            c.METADATA_ORIGINATOR_CLASSIFICATION_PATH,
        )
        caveat = compose_caveat(
            record.get_value(Security.METADATA_DISSEMINATION),
            record.get_values(Security.METADATA_RELEASABILITY),
        )
        add_field_if_present(tracker, caveat, c.METADATA_RELEASABILITY_PATH)
