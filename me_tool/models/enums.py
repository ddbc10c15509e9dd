import enum


class Role(str, enum.Enum):
    """Staff roles"""
    STAFF = "STAFF"
    ADMIN = "ADMIN"


class Status(str, enum.Enum):
    """Delivery status shared by objectives and projects"""
    ON_TRACK = "ON_TRACK"
    AT_RISK = "AT_RISK"
    DELAYED = "DELAYED"
    COMPLETED = "COMPLETED"


class Sex(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class AgeGroup(str, enum.Enum):
    GROUP_18_29 = "GROUP_18_29"
    GROUP_30_44 = "GROUP_30_44"
    GROUP_45_54 = "GROUP_45_54"
    GROUP_55_64 = "GROUP_55_64"
    GROUP_65_PLUS = "GROUP_65_PLUS"


AGE_GROUP_LABELS = {
    AgeGroup.GROUP_18_29: "18-29",
    AgeGroup.GROUP_30_44: "30-44",
    AgeGroup.GROUP_45_54: "45-54",
    AgeGroup.GROUP_55_64: "55-64",
    AgeGroup.GROUP_65_PLUS: "65+",
}
