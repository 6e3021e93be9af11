"""Enumerations shared by entities and API schemas."""

from enum import Enum


class SubscriptionPlan(str, Enum):
    MENSILE = "MENSILE"
    TRIMESTRALE = "TRIMESTRALE"
    SEMESTRALE = "SEMESTRALE"
    ANNUALE = "ANNUALE"


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    CLIENTE = "CLIENTE"


class ComicCategory(str, Enum):
    FANTASY = "FANTASY"
    FANTASCIENZA = "FANTASCIENZA"
    HORROR = "HORROR"
    SUPEREROI = "SUPEREROI"
    SPORTIVO = "SPORTIVO"
    SCOLASTICO = "SCOLASTICO"
    ROMANTICO = "ROMANTICO"
    AZIONE = "AZIONE"


class CopyCondition(str, Enum):
    NUOVO = "NUOVO"
    USATO = "USATO"


class AuctionStatus(str, Enum):
    IN_CORSO = "IN_CORSO"
    CONCLUSA = "CONCLUSA"
    ANNULLATA = "ANNULLATA"


class OrderStatus(str, Enum):
    CONSEGNATO = "CONSEGNATO"
    ANNULLATO = "ANNULLATO"
    IN_CONSEGNA = "IN_CONSEGNA"
