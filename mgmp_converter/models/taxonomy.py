"""Attribute names read from source records."""


class Core:
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    CREATED = "created"
    MODIFIED = "modified"
    EXPIRATION = "expiration"
    LANGUAGE = "language"
    LOCATION = "location"
    RESOURCE_DOWNLOAD_URL = "resource-download-url"
    METACARD_CREATED = "metacard.created"
    METACARD_MODIFIED = "metacard.modified"


class Contact:
    PUBLISHER_NAME = "contact.publisher-name"
    PUBLISHER_PHONE = "contact.publisher-phone"
    PUBLISHER_ADDRESS = "contact.publisher-address"
    PUBLISHER_EMAIL = "contact.publisher-email"
    POINT_OF_CONTACT_NAME = "contact.point-of-contact-name"
    POINT_OF_CONTACT_PHONE = "contact.point-of-contact-phone"
    POINT_OF_CONTACT_ADDRESS = "contact.point-of-contact-address"
    POINT_OF_CONTACT_EMAIL = "contact.point-of-contact-email"


class Location:
    ALTITUDE = "location.altitude-meters"
    COUNTRY_CODE = "location.country-code"
    COORDINATE_REFERENCE_SYSTEM_CODE = "location.crs-code"


class DateTime:
    START = "datetime.start"
    END = "datetime.end"


class Topic:
    CATEGORY = "topic.category"
    KEYWORD = "topic.keyword"


class Media:
    FORMAT = "media.format"
    FORMAT_VERSION = "media.format-version"


class Associations:
    RELATED = "metacard.associations.related"


class Isr:
    CLOUD_COVER = "isr.cloud-cover"
    COMMENTS = "isr.comments"
    NATIONAL_IMAGERY_INTERPRETABILITY_RATING_SCALE = "isr.niirs"


class Security:
    CLASSIFICATION = "security.classification"
    METADATA_CLASSIFICATION = "ext.security.metadata-classification"
    METADATA_ORIGINATOR_CLASSIFICATION = (
        "ext.security.metadata-originator-classification"
    )
    METADATA_DISSEMINATION = "ext.security.metadata-dissemination-controls"
    METADATA_RELEASABILITY = "ext.security.metadata-releasability"
    RESOURCE_CLASSIFICATION = "ext.security.resource-classification"
    RESOURCE_ORIGINATOR_CLASSIFICATION = (
        "ext.security.resource-originator-classification"
    )
    RESOURCE_DISSEMINATION = "ext.security.resource-dissemination-controls"
    RESOURCE_RELEASABILITY = "ext.security.resource-releasability"


class Extension:
    RESOURCE_STATUS = "ext.resource-status"
    PUBLISHED_DATE = "ext.date-published"


# Attributes whose textual values are parsed into datetimes when loaded from file
DATE_ATTRIBUTES: frozenset[str] = frozenset(
    {
        Core.CREATED,
        Core.MODIFIED,
        Core.EXPIRATION,
        Core.METACARD_CREATED,
        Core.METACARD_MODIFIED,
        DateTime.START,
        DateTime.END,
        Extension.PUBLISHED_DATE,
    }
)
