"""
Static UI strings for the supported languages.

Lookups go through ``translate``; a key that has no string in the requested
language comes back unchanged, so a missing translation shows the raw key
rather than failing.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Union

from .schemas import Period

LANGUAGES = ("fr", "en")


class MessageKey(str, Enum):
    COMMON_SAVE = "common.save"
    COMMON_CANCEL = "common.cancel"
    COMMON_DELETE = "common.delete"
    COMMON_EDIT = "common.edit"
    COMMON_ADD = "common.add"
    COMMON_SUCCESS = "common.success"
    COMMON_ERROR = "common.error"
    COMMON_LOADING = "common.loading"

    APP_TITLE = "app.title"
    APP_SUBTITLE = "app.subtitle"
    APP_INITIALIZING = "app.initializing"
    APP_LOADING = "app.loading"

    NAV_DASHBOARD = "nav.dashboard"
    NAV_RABBITS = "nav.rabbits"
    NAV_STOCKS = "nav.stocks"
    NAV_FINANCES = "nav.finances"
    NAV_REPORTS = "nav.reports"

    DATABASE_INITIALIZED = "database.initialized"
    DATABASE_ERROR = "database.error"

    DASHBOARD_TITLE = "dashboard.title"
    DASHBOARD_TOTAL_RABBITS = "dashboard.totalRabbits"
    DASHBOARD_READY_FOR_SALE = "dashboard.readyForSale"
    DASHBOARD_BREEDERS = "dashboard.breeders"
    DASHBOARD_MONTHLY_REVENUE = "dashboard.monthlyRevenue"
    DASHBOARD_MONTHLY_EXPENSES = "dashboard.monthlyExpenses"
    DASHBOARD_MONTHLY_PROFIT = "dashboard.monthlyProfit"
    DASHBOARD_LOW_STOCK = "dashboard.lowStock"
    DASHBOARD_QUICK_ACTIONS = "dashboard.quickActions"
    DASHBOARD_ADD_RABBIT = "dashboard.addRabbit"
    DASHBOARD_RECORD_SALE = "dashboard.recordSale"
    DASHBOARD_ALERTS = "dashboard.alerts"

    RABBITS_TITLE = "rabbits.title"
    RABBITS_ADD = "rabbits.add"
    RABBITS_NAME = "rabbits.name"
    RABBITS_SEX = "rabbits.sex"
    RABBITS_MALE = "rabbits.male"
    RABBITS_FEMALE = "rabbits.female"
    RABBITS_BREED = "rabbits.breed"
    RABBITS_BIRTH_DATE = "rabbits.birthDate"
    RABBITS_CURRENT_WEIGHT = "rabbits.currentWeight"
    RABBITS_STATUS = "rabbits.status"
    RABBITS_MOTHER = "rabbits.mother"
    RABBITS_FATHER = "rabbits.father"
    RABBITS_AGE = "rabbits.age"
    RABBITS_DAYS = "rabbits.days"
    RABBITS_KG = "rabbits.kg"
    RABBITS_STATUS_YOUNG = "rabbits.status_young"
    RABBITS_STATUS_WEANED = "rabbits.status_weaned"
    RABBITS_STATUS_READY_FOR_SALE = "rabbits.status_ready_for_sale"
    RABBITS_STATUS_BREEDER = "rabbits.status_breeder"
    RABBITS_STATUS_SICK = "rabbits.status_sick"
    RABBITS_STATUS_SOLD = "rabbits.status_sold"

    STOCKS_TITLE = "stocks.title"
    STOCKS_ADD = "stocks.add"
    STOCKS_NAME = "stocks.name"
    STOCKS_TYPE = "stocks.type"
    STOCKS_QUANTITY = "stocks.quantity"
    STOCKS_UNIT = "stocks.unit"
    STOCKS_ALERT_THRESHOLD = "stocks.alertThreshold"
    STOCKS_UNIT_PRICE = "stocks.unitPrice"
    STOCKS_SUPPLIER = "stocks.supplier"
    STOCKS_TYPE_FEED = "stocks.type_feed"
    STOCKS_TYPE_MEDICINE = "stocks.type_medicine"
    STOCKS_TYPE_EQUIPMENT = "stocks.type_equipment"

    FINANCES_TITLE = "finances.title"
    FINANCES_ADD = "finances.add"
    FINANCES_TYPE = "finances.type"
    FINANCES_AMOUNT = "finances.amount"
    FINANCES_DESCRIPTION = "finances.description"
    FINANCES_DATE = "finances.date"
    FINANCES_CATEGORY = "finances.category"
    FINANCES_TYPE_SALE = "finances.type_sale"
    FINANCES_TYPE_PURCHASE = "finances.type_purchase"

    REPORTS_TITLE = "reports.title"
    REPORTS_GENERATE = "reports.generate"
    REPORTS_PERIOD = "reports.period"
    REPORTS_THIS_WEEK = "reports.thisWeek"
    REPORTS_THIS_MONTH = "reports.thisMonth"
    REPORTS_THIS_YEAR = "reports.thisYear"
    REPORTS_UNKNOWN_PERIOD = "reports.unknownPeriod"


K = MessageKey

TRANSLATIONS: Dict[str, Dict[MessageKey, str]] = {
    "fr": {
        K.COMMON_SAVE: "Enregistrer",
        K.COMMON_CANCEL: "Annuler",
        K.COMMON_DELETE: "Supprimer",
        K.COMMON_EDIT: "Modifier",
        K.COMMON_ADD: "Ajouter",
        K.COMMON_SUCCESS: "Succès",
        K.COMMON_ERROR: "Erreur",
        K.COMMON_LOADING: "Chargement...",
        K.APP_TITLE: "CuniGestion",
        K.APP_SUBTITLE: "Gestion d'élevage de lapins",
        K.APP_INITIALIZING: "Initialisation...",
        K.APP_LOADING: "Chargement de la base de données...",
        K.NAV_DASHBOARD: "Tableau de bord",
        K.NAV_RABBITS: "Lapins",
        K.NAV_STOCKS: "Stocks",
        K.NAV_FINANCES: "Finances",
        K.NAV_REPORTS: "Rapports",
        K.DATABASE_INITIALIZED: "Base de données initialisée",
        K.DATABASE_ERROR: "Erreur d'initialisation de la base de données",
        K.DASHBOARD_TITLE: "Tableau de bord",
        K.DASHBOARD_TOTAL_RABBITS: "Total lapins",
        K.DASHBOARD_READY_FOR_SALE: "Prêts vente",
        K.DASHBOARD_BREEDERS: "Reproducteurs",
        K.DASHBOARD_MONTHLY_REVENUE: "Revenus mois",
        K.DASHBOARD_MONTHLY_EXPENSES: "Dépenses mois",
        K.DASHBOARD_MONTHLY_PROFIT: "Bénéfice mois",
        K.DASHBOARD_LOW_STOCK: "Stocks bas",
        K.DASHBOARD_QUICK_ACTIONS: "Actions rapides",
        K.DASHBOARD_ADD_RABBIT: "Nouveau lapin",
        K.DASHBOARD_RECORD_SALE: "Enregistrer vente",
        K.DASHBOARD_ALERTS: "Alertes",
        K.RABBITS_TITLE: "Gestion des lapins",
        K.RABBITS_ADD: "Ajouter un lapin",
        K.RABBITS_NAME: "Nom",
        K.RABBITS_SEX: "Sexe",
        K.RABBITS_MALE: "Mâle",
        K.RABBITS_FEMALE: "Femelle",
        K.RABBITS_BREED: "Race",
        K.RABBITS_BIRTH_DATE: "Date de naissance",
        K.RABBITS_CURRENT_WEIGHT: "Poids actuel",
        K.RABBITS_STATUS: "Statut",
        K.RABBITS_MOTHER: "Mère",
        K.RABBITS_FATHER: "Père",
        K.RABBITS_AGE: "Âge",
        K.RABBITS_DAYS: "jours",
        K.RABBITS_KG: "kg",
        K.RABBITS_STATUS_YOUNG: "Jeune",
        K.RABBITS_STATUS_WEANED: "Sevré",
        K.RABBITS_STATUS_READY_FOR_SALE: "Prêt vente",
        K.RABBITS_STATUS_BREEDER: "Reproducteur",
        K.RABBITS_STATUS_SICK: "Malade",
        K.RABBITS_STATUS_SOLD: "Vendu",
        K.STOCKS_TITLE: "Gestion des stocks",
        K.STOCKS_ADD: "Ajouter stock",
        K.STOCKS_NAME: "Nom",
        K.STOCKS_TYPE: "Type",
        K.STOCKS_QUANTITY: "Quantité",
        K.STOCKS_UNIT: "Unité",
        K.STOCKS_ALERT_THRESHOLD: "Seuil alerte",
        K.STOCKS_UNIT_PRICE: "Prix unitaire",
        K.STOCKS_SUPPLIER: "Fournisseur",
        K.STOCKS_TYPE_FEED: "Aliment",
        K.STOCKS_TYPE_MEDICINE: "Médicament",
        K.STOCKS_TYPE_EQUIPMENT: "Matériel",
        K.FINANCES_TITLE: "Gestion financière",
        K.FINANCES_ADD: "Nouvelle transaction",
        K.FINANCES_TYPE: "Type",
        K.FINANCES_AMOUNT: "Montant",
        K.FINANCES_DESCRIPTION: "Description",
        K.FINANCES_DATE: "Date",
        K.FINANCES_CATEGORY: "Catégorie",
        K.FINANCES_TYPE_SALE: "Vente",
        K.FINANCES_TYPE_PURCHASE: "Achat",
        K.REPORTS_TITLE: "Rapports et analyses",
        K.REPORTS_GENERATE: "Générer rapport",
        K.REPORTS_PERIOD: "Période",
        K.REPORTS_THIS_WEEK: "Cette semaine",
        K.REPORTS_THIS_MONTH: "Ce mois",
        K.REPORTS_THIS_YEAR: "Cette année",
        K.REPORTS_UNKNOWN_PERIOD: "Période inconnue",
    },
    "en": {
        K.COMMON_SAVE: "Save",
        K.COMMON_CANCEL: "Cancel",
        K.COMMON_DELETE: "Delete",
        K.COMMON_EDIT: "Edit",
        K.COMMON_ADD: "Add",
        K.COMMON_SUCCESS: "Success",
        K.COMMON_ERROR: "Error",
        K.COMMON_LOADING: "Loading...",
        K.APP_TITLE: "CuniGestion",
        K.APP_SUBTITLE: "Rabbit farming management",
        K.APP_INITIALIZING: "Initializing...",
        K.APP_LOADING: "Loading database...",
        K.NAV_DASHBOARD: "Dashboard",
        K.NAV_RABBITS: "Rabbits",
        K.NAV_STOCKS: "Stocks",
        K.NAV_FINANCES: "Finances",
        K.NAV_REPORTS: "Reports",
        K.DATABASE_INITIALIZED: "Database initialized",
        K.DATABASE_ERROR: "Database initialization error",
        K.DASHBOARD_TITLE: "Dashboard",
        K.DASHBOARD_TOTAL_RABBITS: "Total rabbits",
        K.DASHBOARD_READY_FOR_SALE: "Ready for sale",
        K.DASHBOARD_BREEDERS: "Breeders",
        K.DASHBOARD_MONTHLY_REVENUE: "Monthly revenue",
        K.DASHBOARD_MONTHLY_EXPENSES: "Monthly expenses",
        K.DASHBOARD_MONTHLY_PROFIT: "Monthly profit",
        K.DASHBOARD_LOW_STOCK: "Low stock",
        K.DASHBOARD_QUICK_ACTIONS: "Quick actions",
        K.DASHBOARD_ADD_RABBIT: "New rabbit",
        K.DASHBOARD_RECORD_SALE: "Record sale",
        K.DASHBOARD_ALERTS: "Alerts",
        K.RABBITS_TITLE: "Rabbit management",
        K.RABBITS_ADD: "Add rabbit",
        K.RABBITS_NAME: "Name",
        K.RABBITS_SEX: "Sex",
        K.RABBITS_MALE: "Male",
        K.RABBITS_FEMALE: "Female",
        K.RABBITS_BREED: "Breed",
        K.RABBITS_BIRTH_DATE: "Birth date",
        K.RABBITS_CURRENT_WEIGHT: "Current weight",
        K.RABBITS_STATUS: "Status",
        K.RABBITS_MOTHER: "Mother",
        K.RABBITS_FATHER: "Father",
        K.RABBITS_AGE: "Age",
        K.RABBITS_DAYS: "days",
        K.RABBITS_KG: "kg",
        K.RABBITS_STATUS_YOUNG: "Young",
        K.RABBITS_STATUS_WEANED: "Weaned",
        K.RABBITS_STATUS_READY_FOR_SALE: "Ready for sale",
        K.RABBITS_STATUS_BREEDER: "Breeder",
        K.RABBITS_STATUS_SICK: "Sick",
        K.RABBITS_STATUS_SOLD: "Sold",
        K.STOCKS_TITLE: "Stock management",
        K.STOCKS_ADD: "Add stock",
        K.STOCKS_NAME: "Name",
        K.STOCKS_TYPE: "Type",
        K.STOCKS_QUANTITY: "Quantity",
        K.STOCKS_UNIT: "Unit",
        K.STOCKS_ALERT_THRESHOLD: "Alert threshold",
        K.STOCKS_UNIT_PRICE: "Unit price",
        K.STOCKS_SUPPLIER: "Supplier",
        K.STOCKS_TYPE_FEED: "Feed",
        K.STOCKS_TYPE_MEDICINE: "Medicine",
        K.STOCKS_TYPE_EQUIPMENT: "Equipment",
        K.FINANCES_TITLE: "Financial management",
        K.FINANCES_ADD: "New transaction",
        K.FINANCES_TYPE: "Type",
        K.FINANCES_AMOUNT: "Amount",
        K.FINANCES_DESCRIPTION: "Description",
        K.FINANCES_DATE: "Date",
        K.FINANCES_CATEGORY: "Category",
        K.FINANCES_TYPE_SALE: "Sale",
        K.FINANCES_TYPE_PURCHASE: "Purchase",
        K.REPORTS_TITLE: "Reports and analytics",
        K.REPORTS_GENERATE: "Generate report",
        K.REPORTS_PERIOD: "Period",
        K.REPORTS_THIS_WEEK: "This week",
        K.REPORTS_THIS_MONTH: "This month",
        K.REPORTS_THIS_YEAR: "This year",
        K.REPORTS_UNKNOWN_PERIOD: "Unknown period",
    },
}

PERIOD_KEYS = {
    Period.THIS_WEEK: K.REPORTS_THIS_WEEK,
    Period.THIS_MONTH: K.REPORTS_THIS_MONTH,
    Period.THIS_YEAR: K.REPORTS_THIS_YEAR,
}


def translate(key: Union[MessageKey, str], language: str) -> str:
    raw = key.value if isinstance(key, MessageKey) else key
    try:
        message_key = MessageKey(raw)
    except ValueError:
        return raw
    return TRANSLATIONS.get(language, {}).get(message_key, raw)


def period_label(period: Union[Period, str], language: str) -> str:
    try:
        key = PERIOD_KEYS[Period(period)]
    except ValueError:
        key = K.REPORTS_UNKNOWN_PERIOD
    return translate(key, language)


def catalog(language: str) -> Dict[str, str]:
    """Every message key resolved for ``language``, keyed by its dotted name."""
    return {key.value: translate(key, language) for key in MessageKey}
