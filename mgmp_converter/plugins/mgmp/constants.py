"""
MGMP 2.0 document paths, code lists and fixed values.

Paths are written against the ``MD_Metadata`` root. Unprefixed elements live
in the gmd default namespace; ``%index%`` marks repeatable elements.
"""

from mgmp_converter.core.path import INDEX_TAG

ROOT_NODE_NAME = "MD_Metadata"

# --------------------------------------------------------------------------- #
#                                Namespaces                                   #
# --------------------------------------------------------------------------- #

GMD_NAMESPACE = "http://www.isotc211.org/2005/gmd"
GCO_NAMESPACE = "http://www.isotc211.org/2005/gco"
MGMP_NAMESPACE = "http://mod.uk/spatial/ns/mgmp/2.0"
GML_NAMESPACE = "http://www.opengis.net/gml/3.2"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

GMD_NAMESPACE_PATH = "/MD_Metadata/@xmlns"
GCO_NAMESPACE_PATH = "/MD_Metadata/@xmlns:gco"
MGMP_NAMESPACE_PATH = "/MD_Metadata/@xmlns:mgmp"
GML_NAMESPACE_PATH = "/MD_Metadata/@xmlns:gml"
XLINK_NAMESPACE_PATH = "/MD_Metadata/@xmlns:xlink"

# --------------------------------------------------------------------------- #
#                                Code lists                                   #
# --------------------------------------------------------------------------- #

_CODE_LIST_BASE = "http://mod.uk/spatial/codelist/mgmp/2.0/"

LANGUAGE_CODE_LIST = _CODE_LIST_BASE + "MGMP_LanguageCode"
MGMP_CHARACTER_SET_CODE = _CODE_LIST_BASE + "MGMP_CharacterSetCode"
MGMP_SCOPE_CODE = _CODE_LIST_BASE + "MGMP_ScopeCode"
MGMP_ROLE_CODE = _CODE_LIST_BASE + "MGMP_RoleCode"
MGMP_DATE_TYPE_CODE = _CODE_LIST_BASE + "MGMP_DateTypeCode"
MGMP_PROGRESS_CODE = _CODE_LIST_BASE + "MGMP_ProgressCode"
MGMP_ASSOCIATION_TYPE_CODE = _CODE_LIST_BASE + "MGMP_AssociationTypeCode"
MGMP_COVERAGE_CONTENT_TYPE_CODE = _CODE_LIST_BASE + "MGMP_CoverageContentTypeCode"
UK_GOVERNMENT_CLASSIFICATION_CODE = (
    _CODE_LIST_BASE + "MGMP_ClassificationUK_GovCode"
)
CLASSIFICATION_CODE = _CODE_LIST_BASE + "MGMP_ClassificationCode"

# --------------------------------------------------------------------------- #
#                               Fixed values                                  #
# --------------------------------------------------------------------------- #

ENCODING_TYPE = "utf8"
ENCODING_DESCRIPTION = "UTF-8"
HIERARCHY_LEVEL = "dataset"
METADATA_STANDARD_NAME = "MOD Geospatial Metadata Profile"
METADATA_STANDARD_VERSION = "2.0"
DEFAULT_RESOURCE_STATUS = "onGoing"
DEFAULT_USE_LIMITATION = "No known limitations; see Legal and Security Constraints."
DEFAULT_OTHER_CONSTRAINTS = (
    "No known Legal Constraints, please refer to Security Constraints."
)
COUNTRY_CODE_SPACE = "ISO3166-1-a3"
VERTICAL_CRS_HREF = "http://www.opengis.net/def/crs/EPSG/0/5701"
VERTICAL_CRS_TITLE = "Newlyn Height"
GML_ID_PREFIX = "GMLID_"
NIIRS = "NIIRS"
RELEASABLE_TO = "Releasable to"

UUID_CODE_SPACE = "UUID"
SOURCE_SYSTEM_ID_CODE_SPACE = "sourceSystemId"
SOURCE_SYSTEM_NAME_CODE_SPACE = "sourceSystemName"
RELATED_CODE_SPACE = "UUIDCollectiveProduct"

MIN_CLOUD_COVERAGE = 0
MAX_CLOUD_COVERAGE = 100

CRS_CODE_PATTERN = r"^[^:]+:[^:]+$"

# (codeListValue, text) for each citation date type
LAST_UPDATE = ("lastUpdate", "LastUpdate")
CREATION = ("creation", "Creation")
EXPIRY = ("expiry", "Expiry")
PUBLICATION = ("publication", "Publication")

# --------------------------------------------------------------------------- #
#                          Record-level paths                                 #
# --------------------------------------------------------------------------- #

FILE_IDENTIFIER_PATH = "/MD_Metadata/fileIdentifier/gco:CharacterString"

LANGUAGE_CODE_LIST_PATH = "/MD_Metadata/language/LanguageCode/@codeList"
LANGUAGE_CODE_LIST_VALUE_PATH = "/MD_Metadata/language/LanguageCode/@codeListValue"
LANGUAGE_CODE_PATH = "/MD_Metadata/language/LanguageCode"

CHARACTER_SET_CODE_LIST_PATH = "/MD_Metadata/characterSet/MD_CharacterSetCode/@codeList"
CHARACTER_SET_CODE_LIST_VALUE_PATH = (
    "/MD_Metadata/characterSet/MD_CharacterSetCode/@codeListValue"
)
CHARACTER_SET_TEXT_PATH = "/MD_Metadata/characterSet/MD_CharacterSetCode"

HIERARCHY_LEVEL_CODE_LIST_VALUE_PATH = (
    "/MD_Metadata/hierarchyLevel/MD_ScopeCode/@codeListValue"
)
HIERARCHY_LEVEL_CODE_LIST_PATH = "/MD_Metadata/hierarchyLevel/MD_ScopeCode/@codeList"

_CONTACT = "/MD_Metadata/contact/CI_ResponsibleParty"
CONTACT_ORGANISATION_PATH = _CONTACT + "/organisationName/gco:CharacterString"
CONTACT_PHONE_PATH = (
    _CONTACT
    + "/contactInfo/CI_Contact/phone/CI_Telephone/voice["
    + INDEX_TAG
    + "]/gco:CharacterString"
)
CONTACT_ADDRESS_PATH = (
    _CONTACT
    + "/contactInfo/CI_Contact/address/CI_Address/deliveryPoint["
    + INDEX_TAG
    + "]/gco:CharacterString"
)
CONTACT_EMAIL_PATH = (
    _CONTACT
    + "/contactInfo/CI_Contact/address/CI_Address/electronicMailAddress["
    + INDEX_TAG
    + "]/gco:CharacterString"
)
CONTACT_ROLE_CODE_LIST_PATH = _CONTACT + "/role/CI_RoleCode/@codeList"
CONTACT_ROLE_CODE_LIST_VALUE_PATH = _CONTACT + "/role/CI_RoleCode/@codeListValue"
CONTACT_ROLE_TEXT_PATH = _CONTACT + "/role/CI_RoleCode"

DATE_STAMP_PATH = "/MD_Metadata/dateStamp/gco:DateTime"
METADATA_STANDARD_NAME_PATH = "/MD_Metadata/metadataStandardName/gco:CharacterString"
METADATA_STANDARD_VERSION_PATH = (
    "/MD_Metadata/metadataStandardVersion/gco:CharacterString"
)

_CRS = (
    "/MD_Metadata/referenceSystemInfo["
    + INDEX_TAG
    + "]/MD_ReferenceSystem/referenceSystemIdentifier/RS_Identifier"
)
CRS_CODE_PATH = _CRS + "/code/gco:CharacterString"
CRS_AUTHORITY_PATH = _CRS + "/codeSpace/gco:CharacterString"

# --------------------------------------------------------------------------- #
#                         Identification paths                                #
# --------------------------------------------------------------------------- #

_IDENT = "/MD_Metadata/identificationInfo/MD_DataIdentification"
_CITATION = _IDENT + "/citation/CI_Citation"

TITLE_PATH = _CITATION + "/title/gco:CharacterString"

_CITATION_DATE = _CITATION + "/date[" + INDEX_TAG + "]/CI_Date"
CITATION_DATE_PATH = _CITATION_DATE + "/date/gco:DateTime"
DATE_TYPE_CODE_VALUE_PATH = _CITATION_DATE + "/dateType/CI_DateTypeCode/@codeListValue"
DATE_TYPE_CODE_LIST_PATH = _CITATION_DATE + "/dateType/CI_DateTypeCode/@codeList"
DATE_TYPE_CODE_TEXT_PATH = _CITATION_DATE + "/dateType/CI_DateTypeCode"
EDITION_DATE_PATH = _CITATION + "/editionDate/gco:DateTime"

_CITATION_IDENTIFIER = _CITATION + "/identifier[" + INDEX_TAG + "]/RS_Identifier"
CITATION_IDENTIFIER_CODE_PATH = _CITATION_IDENTIFIER + "/code/gco:CharacterString"
CITATION_IDENTIFIER_CODE_SPACE_PATH = (
    _CITATION_IDENTIFIER + "/codeSpace/gco:CharacterString"
)

ABSTRACT_PATH = _IDENT + "/abstract/gco:CharacterString"

RESOURCE_STATUS_CODE_LIST_VALUE_PATH = _IDENT + "/status/MD_ProgressCode/@codeListValue"
RESOURCE_STATUS_CODE_LIST_PATH = _IDENT + "/status/MD_ProgressCode/@codeList"
RESOURCE_STATUS_TEXT_PATH = _IDENT + "/status/MD_ProgressCode"

_POC = _IDENT + "/pointOfContact/CI_ResponsibleParty"
POINT_OF_CONTACT_NAME_PATH = _POC + "/organisationName/gco:CharacterString"
POINT_OF_CONTACT_PHONE_PATH = (
    _POC
    + "/contactInfo/CI_Contact/phone/CI_Telephone/voice["
    + INDEX_TAG
    + "]/gco:CharacterString"
)
POINT_OF_CONTACT_ADDRESS_PATH = (
    _POC
    + "/contactInfo/CI_Contact/address/CI_Address/deliveryPoint["
    + INDEX_TAG
    + "]/gco:CharacterString"
)
POINT_OF_CONTACT_EMAIL_PATH = (
    _POC
    + "/contactInfo/CI_Contact/address/CI_Address/electronicMailAddress["
    + INDEX_TAG
    + "]/gco:CharacterString"
)
POINT_OF_CONTACT_ROLE_CODE_LIST_PATH = _POC + "/role/CI_RoleCode/@codeList"
POINT_OF_CONTACT_ROLE_CODE_LIST_VALUE_PATH = _POC + "/role/CI_RoleCode/@codeListValue"
POINT_OF_CONTACT_ROLE_TEXT_PATH = _POC + "/role/CI_RoleCode"

KEYWORD_PATH = (
    _IDENT + "/descriptiveKeywords/MD_Keywords/keyword[" + INDEX_TAG + "]/gco:CharacterString"
)
EMPTY_KEYWORDS_PATH = _IDENT + "/descriptiveKeywords"

_RESOURCE_CONSTRAINTS = _IDENT + "/resourceConstraints[" + INDEX_TAG + "]"
_RESOURCE_SECURITY = _RESOURCE_CONSTRAINTS + "/mgmp:MGMP_SecurityConstraints"
RESOURCE_SECURITY_CODE_LIST_PATH = (
    _RESOURCE_SECURITY + "/classification/MD_ClassificationCode/@codeList"
)
RESOURCE_SECURITY_CODE_LIST_VALUE_PATH = (
    _RESOURCE_SECURITY + "/classification/MD_ClassificationCode/@codeListValue"
)
RESOURCE_SECURITY_CLASSIFICATION_PATH = (
    _RESOURCE_SECURITY + "/classification/MD_ClassificationCode"
)
RESOURCE_ORIGINATOR_SECURITY_CODE_LIST_PATH = (
    _RESOURCE_SECURITY + "/mgmp:originatorClassification/MD_ClassificationCode/@codeList"
)
RESOURCE_ORIGINATOR_SECURITY_CODE_LIST_VALUE_PATH = (
    _RESOURCE_SECURITY
    + "/mgmp:originatorClassification/MD_ClassificationCode/@codeListValue"
)
RESOURCE_ORIGINATOR_SECURITY_PATH = (
    _RESOURCE_SECURITY + "/mgmp:originatorClassification/MD_ClassificationCode"
)
RESOURCE_SECURITY_RELEASABILITY_PATH = (
    _RESOURCE_SECURITY + "/mgmp:caveat/gco:CharacterString"
)
USE_LIMITATIONS_PATH = (
    _RESOURCE_CONSTRAINTS + "/MD_Constraints/useLimitation/gco:CharacterString"
)
LEGAL_CONSTRAINTS_PATH = (
    _RESOURCE_CONSTRAINTS + "/MD_LegalConstraints/otherConstraints/gco:CharacterString"
)

_AGGREGATE = _IDENT + "/aggregationInfo/MD_AggregateInformation"
ASSOCIATION_PATH = (
    _AGGREGATE + "/aggregateDataSetIdentifier/RS_Identifier/code/gco:CharacterString"
)
ASSOCIATIONS_RELATED_CODE_SPACE_PATH = (
    _AGGREGATE
    + "/aggregateDataSetIdentifier/RS_Identifier/codeSpace/gco:CharacterString"
)
ASSOCIATIONS_RELATED_TYPE_CODE_LIST_PATH = (
    _AGGREGATE + "/associationType/DS_AssociationTypeCode/@codeList"
)
ASSOCIATIONS_RELATED_TYPE_CODE_LIST_VALUE_PATH = (
    _AGGREGATE + "/associationType/DS_AssociationTypeCode/@codeListValue"
)
ASSOCIATIONS_RELATED_TYPE_TEXT_PATH = (
    _AGGREGATE + "/associationType/DS_AssociationTypeCode"
)

_IDENT_LANGUAGE = _IDENT + "/language[" + INDEX_TAG + "]/LanguageCode"
IDENTIFICATION_LANGUAGE_CODE_LIST_PATH = _IDENT_LANGUAGE + "/@codeList"
IDENTIFICATION_LANGUAGE_CODE_LIST_VALUE_PATH = _IDENT_LANGUAGE + "/@codeListValue"
IDENTIFICATION_LANGUAGE_TEXT_PATH = _IDENT_LANGUAGE

TOPIC_CATEGORY_PATH = _IDENT + "/topicCategory[" + INDEX_TAG + "]/MD_TopicCategoryCode"
EMPTY_TOPIC_CATEGORY_PATH = _IDENT + "/topicCategory"

# --------------------------------------------------------------------------- #
#                             Extent paths                                    #
# --------------------------------------------------------------------------- #

_EXTENT = _IDENT + "/extent/EX_Extent"
_GEOGRAPHIC_ELEMENT = _EXTENT + "/geographicElement[" + INDEX_TAG + "]"

_COUNTRY = _GEOGRAPHIC_ELEMENT + "/EX_GeographicDescription/geographicIdentifier/RS_Identifier"
COUNTRY_CODE_PATH = _COUNTRY + "/code/gco:CharacterString"
COUNTRY_CODE_SPACE_PATH = _COUNTRY + "/codeSpace/gco:CharacterString"

_POLYGON = _GEOGRAPHIC_ELEMENT + "/EX_BoundingPolygon/polygon/gml:Polygon"
POLYGON_GML_ID_PATH = _POLYGON + "/@gml:id"
POLYGON_SRS_NAME_PATH = _POLYGON + "/@srsName"
BOUNDING_POLYGON_PATH = _POLYGON + "/gml:exterior/gml:LinearRing/gml:posList"

_BBOX = _GEOGRAPHIC_ELEMENT + "/EX_GeographicBoundingBox"
BBOX_DECIMAL_SUFFIX = "/gco:Decimal"
WEST_BOUND_LONGITUDE_PATH = _BBOX + "/westBoundLongitude" + BBOX_DECIMAL_SUFFIX
EAST_BOUND_LONGITUDE_PATH = _BBOX + "/eastBoundLongitude" + BBOX_DECIMAL_SUFFIX
SOUTH_BOUND_LATITUDE_PATH = _BBOX + "/southBoundLatitude" + BBOX_DECIMAL_SUFFIX
NORTH_BOUND_LATITUDE_PATH = _BBOX + "/northBoundLatitude" + BBOX_DECIMAL_SUFFIX

_TEMPORAL = _EXTENT + "/temporalElement[" + INDEX_TAG + "]/EX_TemporalExtent/extent"
TEMPORAL_TIME_INSTANT_ID_PATH = _TEMPORAL + "/gml:TimeInstant/@gml:id"
TEMPORAL_INSTANT_PATH = _TEMPORAL + "/gml:TimeInstant/gml:timePosition"
TEMPORAL_TIME_PERIOD_ID_PATH = _TEMPORAL + "/gml:TimePeriod/@gml:id"
TEMPORAL_START_PATH = _TEMPORAL + "/gml:TimePeriod/gml:beginPosition"
TEMPORAL_END_PATH = _TEMPORAL + "/gml:TimePeriod/gml:endPosition"

_VERTICAL = _EXTENT + "/verticalElement/EX_VerticalExtent"
MIN_ALTITUDE_PATH = _VERTICAL + "/minimumValue/gco:Real"
MAX_ALTITUDE_PATH = _VERTICAL + "/maximumValue/gco:Real"
VERTICAL_CRS_XLINK_HREF_PATH = _VERTICAL + "/verticalCRS/@xlink:href"
VERTICAL_CRS_XLINK_TITLE_PATH = _VERTICAL + "/verticalCRS/@xlink:title"

# --------------------------------------------------------------------------- #
#                         Content information paths                           #
# --------------------------------------------------------------------------- #

_IMAGE = "/MD_Metadata/contentInfo/mgmp:MGMP_ImageDescription"
IMAGE_COMMENT_PATH = _IMAGE + "/attributeDescription/gco:RecordType"
IMAGE_COMMENT_NIL_REASON_PATH = _IMAGE + "/attributeDescription/@gco:nilReason"
IMAGE_CONTENT_TYPE_TEXT_PATH = _IMAGE + "/contentType/MD_CoverageContentTypeCode"
IMAGE_CONTENT_TYPE_CODE_LIST_PATH = (
    _IMAGE + "/contentType/MD_CoverageContentTypeCode/@codeList"
)
IMAGE_CONTENT_TYPE_CODE_LIST_VALUE_PATH = (
    _IMAGE + "/contentType/MD_CoverageContentTypeCode/@codeListValue"
)
NIIRS_RATING_PATH = _IMAGE + "/imageQualityCode/RS_Identifier/code/gco:CharacterString"
NIIRS_PATH = _IMAGE + "/imageQualityCode/RS_Identifier/codeSpace/gco:CharacterString"
CLOUD_COVERAGE_PATH = _IMAGE + "/cloudCoverPercentage/gco:Real"

# --------------------------------------------------------------------------- #
#                           Distribution paths                                #
# --------------------------------------------------------------------------- #

_DISTRIBUTION = "/MD_Metadata/distributionInfo/MD_Distribution"
FORMAT_PATH = _DISTRIBUTION + "/distributionFormat/MD_Format/name/gco:CharacterString"
FORMAT_VERSION_PATH = (
    _DISTRIBUTION + "/distributionFormat/MD_Format/version/gco:CharacterString"
)
LINKAGE_URI_PATH = (
    _DISTRIBUTION
    + "/transferOptions/MD_DigitalTransferOptions/onLine/CI_OnlineResource/linkage/URL"
)

# --------------------------------------------------------------------------- #
#                        Metadata constraint paths                            #
# --------------------------------------------------------------------------- #

_METADATA_SECURITY = "/MD_Metadata/metadataConstraints/mgmp:MGMP_SecurityConstraints"
METADATA_SECURITY_CODE_LIST_PATH = (
    _METADATA_SECURITY + "/classification/MD_ClassificationCode/@codeList"
)
METADATA_SECURITY_CODE_LIST_VALUE_PATH = (
    _METADATA_SECURITY + "/classification/MD_ClassificationCode/@codeListValue"
)
METADATA_SECURITY_CLASSIFICATION_PATH = (
    _METADATA_SECURITY + "/classification/MD_ClassificationCode"
)
METADATA_ORIGINATOR_CLASSIFICATION_CODE_LIST_PATH = (
    _METADATA_SECURITY + "/mgmp:originatorClassification/MD_ClassificationCode/@codeList"
)
METADATA_ORIGINATOR_CLASSIFICATION_CODE_LIST_VALUE_PATH = (
    _METADATA_SECURITY
    + "/mgmp:originatorClassification/MD_ClassificationCode/@codeListValue"
)
METADATA_ORIGINATOR_CLASSIFICATION_PATH = (
    _METADATA_SECURITY + "/mgmp:originatorClassification/MD_ClassificationCode"
)
METADATA_RELEASABILITY_PATH = _METADATA_SECURITY + "/mgmp:caveat/gco:CharacterString"

# --------------------------------------------------------------------------- #
#                       Classification vocabularies                           #
# --------------------------------------------------------------------------- #

# MGMP_ClassificationUK_GovCode code -> label
UK_GOV_CLASSIFICATION_LABELS: dict[str, str] = {
    "secret": "Secret",
    "official": "Official",
    "officialSensitive": "Official Sensitive",
    "topSecret": "Top Secret",
}

# MGMP_ClassificationCode code -> label; looked up case-insensitively
CLASSIFICATION_LABELS: dict[str, str] = {
    "unclassified": "Unclassified",
    "restricted": "Restricted",
    "confidential": "Confidential",
    "secret": "Secret",
    "topSecret": "Top Secret",
}

# MGMP_ClassificationCode code -> MGMP_ClassificationUK_GovCode code
CLASSIFICATION_TO_UK_GOV: dict[str, str] = {
    "unclassified": "official",
    "restricted": "officialSensitive",
    "topSecret": "topSecret",
    "secret": "secret",
}

# --------------------------------------------------------------------------- #
#                          Language display names                             #
# --------------------------------------------------------------------------- #

# ISO 639-1 and 639-2 codes -> English display name
LANGUAGE_DISPLAY_NAMES: dict[str, str] = {
    "ar": "Arabic",
    "ara": "Arabic",
    "cy": "Welsh",
    "cym": "Welsh",
    "wel": "Welsh",
    "da": "Danish",
    "dan": "Danish",
    "de": "German",
    "deu": "German",
    "ger": "German",
    "en": "English",
    "eng": "English",
    "es": "Spanish",
    "spa": "Spanish",
    "fa": "Persian",
    "fas": "Persian",
    "per": "Persian",
    "fr": "French",
    "fra": "French",
    "fre": "French",
    "ga": "Irish",
    "gle": "Irish",
    "gd": "Scottish Gaelic",
    "gla": "Scottish Gaelic",
    "it": "Italian",
    "ita": "Italian",
    "ja": "Japanese",
    "jpn": "Japanese",
    "ko": "Korean",
    "kor": "Korean",
    "nl": "Dutch",
    "nld": "Dutch",
    "dut": "Dutch",
    "no": "Norwegian",
    "nor": "Norwegian",
    "pl": "Polish",
    "pol": "Polish",
    "ps": "Pashto",
    "pus": "Pashto",
    "pt": "Portuguese",
    "por": "Portuguese",
    "ru": "Russian",
    "rus": "Russian",
    "sv": "Swedish",
    "swe": "Swedish",
    "tr": "Turkish",
    "tur": "Turkish",
    "uk": "Ukrainian",
    "ukr": "Ukrainian",
    "ur": "Urdu",
    "urd": "Urdu",
    "zh": "Chinese",
    "zho": "Chinese",
    "chi": "Chinese",
}
