"""Enumerations and merchant data for card issuing resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = [
    "IssuingAuthorizationCheck",
    "IssuingAuthorizationMethod",
    "IssuingAuthorizationReason",
    "IssuingAuthorizationWalletProvider",
    "IssuingCardPinStatus",
    "IssuingCardShippingStatus",
    "IssuingCardShippingType",
    "IssuingCardType",
    "IssuingDisputeReason",
    "IssuingDisputeStatus",
    "IssuingTransactionType",
    "MerchantCategory",
    "MerchantData",
]


class IssuingAuthorizationCheck(StrEnum):
    """Result of a verification check on an authorization."""

    MATCH = "match"
    MISMATCH = "mismatch"
    NOT_PROVIDED = "not_provided"

    @classmethod
    def default(cls) -> IssuingAuthorizationCheck:
        """The check result used when none is given."""
        return cls.NOT_PROVIDED


class IssuingAuthorizationMethod(StrEnum):
    """How the card details were provided for an authorization."""

    KEYED_IN = "keyed_in"
    SWIPE = "swipe"
    CHIP = "chip"
    CONTACTLESS = "contactless"
    ONLINE = "online"

    @classmethod
    def default(cls) -> IssuingAuthorizationMethod:
        """The method used when none is given."""
        return cls.ONLINE


class IssuingAuthorizationReason(StrEnum):
    """Why an authorization request was approved or declined."""

    AUTHENTICATION_FAILED = "authentication_failed"
    AUTHORIZATION_CONTROLS = "authorization_controls"
    CARD_ACTIVE = "card_active"
    CARD_INACTIVE = "card_inactive"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_COMPLIANCE_DISABLED = "account_compliance_disabled"
    ACCOUNT_INACTIVE = "account_inactive"
    SUSPECTED_FRAUD = "suspected_fraud"
    WEBHOOK_APPROVED = "webhook_approved"
    WEBHOOK_DECLINED = "webhook_declined"
    WEBHOOK_TIMEOUT = "webhook_timeout"

    @classmethod
    def default(cls) -> IssuingAuthorizationReason:
        """The reason used when none is given."""
        return cls.AUTHENTICATION_FAILED


class IssuingAuthorizationWalletProvider(StrEnum):
    """The digital wallet used for an authorization."""

    APPLE_PAY = "apple_pay"
    GOOGLE_PAY = "google_pay"
    SAMSUNG_PAY = "samsung_pay"

    @classmethod
    def default(cls) -> IssuingAuthorizationWalletProvider:
        """The wallet provider used when none is given."""
        return cls.APPLE_PAY


class IssuingCardPinStatus(StrEnum):
    """Whether a card's PIN is usable."""

    ACTIVE = "active"
    BLOCKED = "blocked"


class IssuingCardShippingStatus(StrEnum):
    """Delivery state of a physical card."""

    CANCELED = "canceled"
    DELIVERED = "delivered"
    FAILURE = "failure"
    PENDING = "pending"
    RETURNED = "returned"
    SHIPPED = "shipped"


class IssuingCardShippingType(StrEnum):
    """Whether a card ships on its own or in bulk."""

    BULK = "bulk"
    INDIVIDUAL = "individual"

    @classmethod
    def default(cls) -> IssuingCardShippingType:
        """The shipping type used when none is given."""
        return cls.INDIVIDUAL


class IssuingCardType(StrEnum):
    """Whether an issued card is physical or virtual."""

    PHYSICAL = "physical"
    VIRTUAL = "virtual"

    @classmethod
    def default(cls) -> IssuingCardType:
        """The card type used when none is given."""
        return cls.PHYSICAL


class IssuingDisputeReason(StrEnum):
    """Why an issuing dispute was opened."""

    FRAUDULENT = "fraudulent"
    OTHER = "other"


class IssuingDisputeStatus(StrEnum):
    """Progress of an issuing dispute."""

    LOST = "lost"
    UNDER_REVIEW = "under_review"
    UNSUBMITTED = "unsubmitted"
    WON = "won"

    @classmethod
    def default(cls) -> IssuingDisputeStatus:
        """The status used when none is given."""
        return cls.UNSUBMITTED


class IssuingTransactionType(StrEnum):
    """The kind of an issuing transaction."""

    CAPTURE = "capture"
    CASH_WITHDRAWAL = "cash_withdrawal"
    DISPUTE = "dispute"
    DISPUTE_LOSS = "dispute_loss"
    REFUND = "refund"
    REFUND_REVERSAL = "refund_reversal"

    @classmethod
    def default(cls) -> IssuingTransactionType:
        """The transaction type used when none is given."""
        return cls.CAPTURE


class MerchantCategory(StrEnum):
    """The industry a merchant belongs to."""

    AC_REFRIGERATION_REPAIR = "ac_refrigeration_repair"
    ACCOUNTING_BOOKKEEPING_SERVICES = "accounting_bookkeeping_services"
    ADVERTISING_SERVICES = "advertising_services"
    AGRICULTURAL_COOPERATIVE = "agricultural_cooperative"
    AIRLINES_AIR_CARRIERS = "airlines_air_carriers"
    AIRPORTS_FLYING_FIELDS = "airports_flying_fields"
    AMBULANCE_SERVICES = "ambulance_services"
    AMUSEMENT_PARKS_CARNIVALS = "amusement_parks_carnivals"
    ANTIQUE_REPRODUCTIONS = "antique_reproductions"
    ANTIQUE_SHOPS = "antique_shops"
    AQUARIUMS = "aquariums"
    ARCHITECTURAL_SURVEYING_SERVICES = "architectural_surveying_services"
    ART_DEALERS_AND_GALLERIES = "art_dealers_and_galleries"
    ARTISTS_SUPPLY_AND_CRAFT_SHOPS = "artists_supply_and_craft_shops"
    AUTO_AND_HOME_SUPPLY_STORES = "auto_and_home_supply_stores"
    AUTO_BODY_REPAIR_SHOPS = "auto_body_repair_shops"
    AUTO_PAINT_SHOPS = "auto_paint_shops"
    AUTO_SERVICE_SHOPS = "auto_service_shops"
    AUTOMATED_CASH_DISBURSE = "automated_cash_disburse"
    AUTOMATED_FUEL_DISPENSERS = "automated_fuel_dispensers"
    AUTOMOBILE_ASSOCIATIONS = "automobile_associations"
    AUTOMOTIVE_PARTS_AND_ACCESSORIES_STORES = "automotive_parts_and_accessories_stores"
    AUTOMOTIVE_TIRE_STORES = "automotive_tire_stores"
    BAIL_AND_BOND_PAYMENTS = "bail_and_bond_payments"
    BAKERIES = "bakeries"
    BANDS_ORCHESTRAS = "bands_orchestras"
    BARBER_AND_BEAUTY_SHOPS = "barber_and_beauty_shops"
    BETTING_CASINO_GAMBLING = "betting_casino_gambling"
    BICYCLE_SHOPS = "bicycle_shops"
    BILLIARD_POOL_ESTABLISHMENTS = "billiard_pool_establishments"
    BOAT_DEALERS = "boat_dealers"
    BOAT_RENTALS_AND_LEASES = "boat_rentals_and_leases"
    BOOK_STORES = "book_stores"
    BOOKS_PERIODICALS_AND_NEWSPAPERS = "books_periodicals_and_newspapers"
    BOWLING_ALLEYS = "bowling_alleys"
    BUS_LINES = "bus_lines"
    BUSINESS_SECRETARIAL_SCHOOLS = "business_secretarial_schools"
    BUYING_SHOPPING_SERVICES = "buying_shopping_services"
    CABLE_SATELLITE_AND_OTHER_PAY_TELEVISION_AND_RADIO = (
        "cable_satellite_and_other_pay_television_and_radio"
    )
    CAMERA_AND_PHOTOGRAPHIC_SUPPLY_STORES = "camera_and_photographic_supply_stores"
    CANDY_NUT_AND_CONFECTIONERY_STORES = "candy_nut_and_confectionery_stores"
    CAR_AND_TRUCK_DEALERS_NEW_USED = "car_and_truck_dealers_new_used"
    CAR_AND_TRUCK_DEALERS_USED_ONLY = "car_and_truck_dealers_used_only"
    CAR_RENTAL_AGENCIES = "car_rental_agencies"
    CAR_WASHES = "car_washes"
    CARPENTRY_SERVICES = "carpentry_services"
    CARPET_UPHOLSTERY_CLEANING = "carpet_upholstery_cleaning"
    CATERERS = "caterers"
    CHARITABLE_AND_SOCIAL_SERVICE_ORGANIZATIONS_FUNDRAISING = (
        "charitable_and_social_service_organizations_fundraising"
    )
    CHEMICALS_AND_ALLIED_PRODUCTS = "chemicals_and_allied_products"
    CHIDRENS_AND_INFANTS_WEAR_STORES = "chidrens_and_infants_wear_stores"
    CHILD_CARE_SERVICES = "child_care_services"
    CHIROPODISTS_PODIATRISTS = "chiropodists_podiatrists"
    CHIROPRACTORS = "chiropractors"
    CIGAR_STORES_AND_STANDS = "cigar_stores_and_stands"
    CIVIC_SOCIAL_FRATERNAL_ASSOCIATIONS = "civic_social_fraternal_associations"
    CLEANING_AND_MAINTENANCE = "cleaning_and_maintenance"
    CLOTHING_RENTAL = "clothing_rental"
    COLLEGES_UNIVERSITIES = "colleges_universities"
    COMMERCIAL_EQUIPMENT = "commercial_equipment"
    COMMERCIAL_FOOTWEAR = "commercial_footwear"
    COMMERCIAL_PHOTOGRAPHY_ART_AND_GRAPHICS = "commercial_photography_art_and_graphics"
    COMMUTER_TRANSPORT_AND_FERRIES = "commuter_transport_and_ferries"
    COMPUTER_NETWORK_SERVICES = "computer_network_services"
    COMPUTER_PROGRAMMING = "computer_programming"
    COMPUTER_REPAIR = "computer_repair"
    COMPUTER_SOFTWARE_STORES = "computer_software_stores"
    COMPUTERS_PERIPHERALS_AND_SOFTWARE = "computers_peripherals_and_software"
    CONCRETE_WORK_SERVICES = "concrete_work_services"
    CONSTRUCTION_MATERIALS = "construction_materials"
    CONSULTING_PUBLIC_RELATIONS = "consulting_public_relations"
    CORRESPONDENCE_SCHOOLS = "correspondence_schools"
    COSMETIC_STORES = "cosmetic_stores"
    COUNSELING_SERVICES = "counseling_services"
    COUNTRY_CLUBS = "country_clubs"
    COURIER_SERVICES = "courier_services"
    COURT_COSTS = "court_costs"
    CREDIT_REPORTING_AGENCIES = "credit_reporting_agencies"
    CRUISE_LINES = "cruise_lines"
    DAIRY_PRODUCTS_STORES = "dairy_products_stores"
    DANCE_HALL_STUDIOS_SCHOOLS = "dance_hall_studios_schools"
    DATING_ESCORT_SERVICES = "dating_escort_services"
    DENTISTS_ORTHODONTISTS = "dentists_orthodontists"
    DEPARTMENT_STORES = "department_stores"
    DETECTIVE_AGENCIES = "detective_agencies"
    DIRECT_MARKETING_CATALOG_MERCHANT = "direct_marketing_catalog_merchant"
    DIRECT_MARKETING_COMBINATION_CATALOG_AND_RETAIL_MERCHANT = (
        "direct_marketing_combination_catalog_and_retail_merchant"
    )
    DIRECT_MARKETING_INBOUND_TELEMARKETING = "direct_marketing_inbound_telemarketing"
    DIRECT_MARKETING_INSURANCE_SERVICES = "direct_marketing_insurance_services"
    DIRECT_MARKETING_OTHER = "direct_marketing_other"
    DIRECT_MARKETING_OUTBOUND_TELEMARKETING = "direct_marketing_outbound_telemarketing"
    DIRECT_MARKETING_SUBSCRIPTION = "direct_marketing_subscription"
    DIRECT_MARKETING_TRAVEL = "direct_marketing_travel"
    DISCOUNT_STORES = "discount_stores"
    DOCTORS = "doctors"
    DOOR_TO_DOOR_SALES = "door_to_door_sales"
    DRAPERY_WINDOW_COVERING_AND_UPHOLSTERY_STORES = "drapery_window_covering_and_upholstery_stores"
    DRINKING_PLACES = "drinking_places"
    DRUG_STORES_AND_PHARMACIES = "drug_stores_and_pharmacies"
    DRUGS_DRUG_PROPRIETARIES_AND_DRUGGIST_SUNDRIES = "drugs_drug_proprietaries_and_druggist_sundries"
    DRY_CLEANERS = "dry_cleaners"
    DURABLE_GOODS = "durable_goods"
    DUTY_FREE_STORES = "duty_free_stores"
    EATING_PLACES_RESTAURANTS = "eating_places_restaurants"
    EDUCATIONAL_SERVICES = "educational_services"
    ELECTRIC_RAZOR_STORES = "electric_razor_stores"
    ELECTRICAL_PARTS_AND_EQUIPMENT = "electrical_parts_and_equipment"
    ELECTRICAL_SERVICES = "electrical_services"
    ELECTRONICS_REPAIR_SHOPS = "electronics_repair_shops"
    ELECTRONICS_STORES = "electronics_stores"
    ELEMENTARY_SECONDARY_SCHOOLS = "elementary_secondary_schools"
    EMPLOYMENT_TEMP_AGENCIES = "employment_temp_agencies"
    EQUIPMENT_RENTAL = "equipment_rental"
    EXTERMINATING_SERVICES = "exterminating_services"
    FAMILY_CLOTHING_STORES = "family_clothing_stores"
    FAST_FOOD_RESTAURANTS = "fast_food_restaurants"
    FINANCIAL_INSTITUTIONS = "financial_institutions"
    FINES_GOVERNMENT_ADMINISTRATIVE_ENTITIES = "fines_government_administrative_entities"
    FIREPLACE_FIREPLACE_SCREENS_AND_ACCESSORIES_STORES = (
        "fireplace_fireplace_screens_and_accessories_stores"
    )
    FLOOR_COVERING_STORES = "floor_covering_stores"
    FLORISTS = "florists"
    FLORISTS_SUPPLIES_NURSERY_STOCK_AND_FLOWERS = "florists_supplies_nursery_stock_and_flowers"
    FREEZER_AND_LOCKER_MEAT_PROVISIONERS = "freezer_and_locker_meat_provisioners"
    FUEL_DEALERS_NON_AUTOMOTIVE = "fuel_dealers_non_automotive"
    FUNERAL_SERVICES_CREMATORIES = "funeral_services_crematories"
    FURNITURE_HOME_FURNISHINGS_AND_EQUIPMENT_STORES_EXCEPT_APPLIANCES = (
        "furniture_home_furnishings_and_equipment_stores_except_appliances"
    )
    FURNITURE_REPAIR_REFINISHING = "furniture_repair_refinishing"
    FURRIERS_AND_FUR_SHOPS = "furriers_and_fur_shops"
    GENERAL_SERVICES = "general_services"
    GIFT_CARD_NOVELTY_AND_SOUVENIR_SHOPS = "gift_card_novelty_and_souvenir_shops"
    GLASS_PAINT_AND_WALLPAPER_STORES = "glass_paint_and_wallpaper_stores"
    GLASSWARE_CRYSTAL_STORES = "glassware_crystal_stores"
    GOLF_COURSES_PUBLIC = "golf_courses_public"
    GOVERNMENT_SERVICES = "government_services"
    GROCERY_STORES_SUPERMARKETS = "grocery_stores_supermarkets"
    HARDWARE_EQUIPMENT_AND_SUPPLIES = "hardware_equipment_and_supplies"
    HARDWARE_STORES = "hardware_stores"
    HEALTH_AND_BEAUTY_SPAS = "health_and_beauty_spas"
    HEARING_AIDS_SALES_AND_SUPPLIES = "hearing_aids_sales_and_supplies"
    HEATING_PLUMBING_A_C = "heating_plumbing_a_c"
    HOBBY_TOY_AND_GAME_SHOPS = "hobby_toy_and_game_shops"
    HOME_SUPPLY_WAREHOUSE_STORES = "home_supply_warehouse_stores"
    HOSPITALS = "hospitals"
    HOTELS_MOTELS_AND_RESORTS = "hotels_motels_and_resorts"
    HOUSEHOLD_APPLIANCE_STORES = "household_appliance_stores"
    INDUSTRIAL_SUPPLIES = "industrial_supplies"
    INFORMATION_RETRIEVAL_SERVICES = "information_retrieval_services"
    INSURANCE_DEFAULT = "insurance_default"
    INSURANCE_UNDERWRITING_PREMIUMS = "insurance_underwriting_premiums"
    INTRA_COMPANY_PURCHASES = "intra_company_purchases"
    JEWELRY_STORES_WATCHES_CLOCKS_AND_SILVERWARE_STORES = (
        "jewelry_stores_watches_clocks_and_silverware_stores"
    )
    LANDSCAPING_SERVICES = "landscaping_services"
    LAUNDRIES = "laundries"
    LAUNDRY_CLEANING_SERVICES = "laundry_cleaning_services"
    LEGAL_SERVICES_ATTORNEYS = "legal_services_attorneys"
    LUGGAGE_AND_LEATHER_GOODS_STORES = "luggage_and_leather_goods_stores"
    LUMBER_BUILDING_MATERIALS_STORES = "lumber_building_materials_stores"
    MANUAL_CASH_DISBURSE = "manual_cash_disburse"
    MARINAS_SERVICE_AND_SUPPLIES = "marinas_service_and_supplies"
    MASONRY_STONEWORK_AND_PLASTER = "masonry_stonework_and_plaster"
    MASSAGE_PARLORS = "massage_parlors"
    MEDICAL_AND_DENTAL_LABS = "medical_and_dental_labs"
    MEDICAL_DENTAL_OPHTHALMIC_AND_HOSPITAL_EQUIPMENT_AND_SUPPLIES = (
        "medical_dental_ophthalmic_and_hospital_equipment_and_supplies"
    )
    MEDICAL_SERVICES = "medical_services"
    MEMBERSHIP_ORGANIZATIONS = "membership_organizations"
    MENS_AND_BOYS_CLOTHING_AND_ACCESSORIES_STORES = "mens_and_boys_clothing_and_accessories_stores"
    MENS_WOMENS_CLOTHING_STORES = "mens_womens_clothing_stores"
    METAL_SERVICE_CENTERS = "metal_service_centers"
    MISCELLANEOUS = "miscellaneous"
    MISCELLANEOUS_APPAREL_AND_ACCESSORY_SHOPS = "miscellaneous_apparel_and_accessory_shops"
    MISCELLANEOUS_AUTO_DEALERS = "miscellaneous_auto_dealers"
    MISCELLANEOUS_BUSINESS_SERVICES = "miscellaneous_business_services"
    MISCELLANEOUS_FOOD_STORES = "miscellaneous_food_stores"
    MISCELLANEOUS_GENERAL_MERCHANDISE = "miscellaneous_general_merchandise"
    MISCELLANEOUS_GENERAL_SERVICES = "miscellaneous_general_services"
    MISCELLANEOUS_HOME_FURNISHING_SPECIALTY_STORES = "miscellaneous_home_furnishing_specialty_stores"
    MISCELLANEOUS_PUBLISHING_AND_PRINTING = "miscellaneous_publishing_and_printing"
    MISCELLANEOUS_RECREATION_SERVICES = "miscellaneous_recreation_services"
    MISCELLANEOUS_REPAIR_SHOPS = "miscellaneous_repair_shops"
    MISCELLANEOUS_SPECIALTY_RETAIL = "miscellaneous_specialty_retail"
    MOBILE_HOME_DEALERS = "mobile_home_dealers"
    MOTION_PICTURE_THEATERS = "motion_picture_theaters"
    MOTOR_FREIGHT_CARRIERS_AND_TRUCKING = "motor_freight_carriers_and_trucking"
    MOTOR_HOMES_DEALERS = "motor_homes_dealers"
    MOTOR_VEHICLE_SUPPLIES_AND_NEW_PARTS = "motor_vehicle_supplies_and_new_parts"
    MOTORCYCLE_SHOPS_AND_DEALERS = "motorcycle_shops_and_dealers"
    MOTORCYCLE_SHOPS_DEALERS = "motorcycle_shops_dealers"
    MUSIC_STORES_MUSICAL_INSTRUMENTS_PIANOS_AND_SHEET_MUSIC = (
        "music_stores_musical_instruments_pianos_and_sheet_music"
    )
    NEWS_DEALERS_AND_NEWSSTANDS = "news_dealers_and_newsstands"
    NON_FI_MONEY_ORDERS = "non_fi_money_orders"
    NON_FI_STORED_VALUE_CARD_PURCHASE_LOAD = "non_fi_stored_value_card_purchase_load"
    NONDURABLE_GOODS = "nondurable_goods"
    NURSERIES_LAWN_AND_GARDEN_SUPPLY_STORES = "nurseries_lawn_and_garden_supply_stores"
    NURSING_PERSONAL_CARE = "nursing_personal_care"
    OFFICE_AND_COMMERCIAL_FURNITURE = "office_and_commercial_furniture"
    OPTICIANS_EYEGLASSES = "opticians_eyeglasses"
    OPTOMETRISTS_OPHTHALMOLOGIST = "optometrists_ophthalmologist"
    ORTHOPEDIC_GOODS_PROSTHETIC_DEVICES = "orthopedic_goods_prosthetic_devices"
    OSTEOPATHS = "osteopaths"
    PACKAGE_STORES_BEER_WINE_AND_LIQUOR = "package_stores_beer_wine_and_liquor"
    PAINTS_VARNISHES_AND_SUPPLIES = "paints_varnishes_and_supplies"
    PARKING_LOTS_GARAGES = "parking_lots_garages"
    PASSENGER_RAILWAYS = "passenger_railways"
    PAWN_SHOPS = "pawn_shops"
    PET_SHOPS_PET_FOOD_AND_SUPPLIES = "pet_shops_pet_food_and_supplies"
    PETROLEUM_AND_PETROLEUM_PRODUCTS = "petroleum_and_petroleum_products"
    PHOTO_DEVELOPING = "photo_developing"
    PHOTOGRAPHIC_PHOTOCOPY_MICROFILM_EQUIPMENT_AND_SUPPLIES = (
        "photographic_photocopy_microfilm_equipment_and_supplies"
    )
    PHOTOGRAPHIC_STUDIOS = "photographic_studios"
    PICTURE_VIDEO_PRODUCTION = "picture_video_production"
    PIECE_GOODS_NOTIONS_AND_OTHER_DRY_GOODS = "piece_goods_notions_and_other_dry_goods"
    PLUMBING_HEATING_EQUIPMENT_AND_SUPPLIES = "plumbing_heating_equipment_and_supplies"
    POLITICAL_ORGANIZATIONS = "political_organizations"
    POSTAL_SERVICES_GOVERNMENT_ONLY = "postal_services_government_only"
    PRECIOUS_STONES_AND_METALS_WATCHES_AND_JEWELRY = "precious_stones_and_metals_watches_and_jewelry"
    PROFESSIONAL_SERVICES = "professional_services"
    PUBLIC_WAREHOUSING_AND_STORAGE = "public_warehousing_and_storage"
    QUICK_COPY_REPRO_AND_BLUEPRINT = "quick_copy_repro_and_blueprint"
    RAILROADS = "railroads"
    REAL_ESTATE_AGENTS_AND_MANAGERS_RENTALS = "real_estate_agents_and_managers_rentals"
    RECORD_STORES = "record_stores"
    RECREATIONAL_VEHICLE_RENTALS = "recreational_vehicle_rentals"
    RELIGIOUS_GOODS_STORES = "religious_goods_stores"
    RELIGIOUS_ORGANIZATIONS = "religious_organizations"
    ROOFING_SIDING_SHEET_METAL = "roofing_siding_sheet_metal"
    SECRETARIAL_SUPPORT_SERVICES = "secretarial_support_services"
    SECURITY_BROKERS_DEALERS = "security_brokers_dealers"
    SERVICE_STATIONS = "service_stations"
    SEWING_NEEDLEWORK_FABRIC_AND_PIECE_GOODS_STORES = "sewing_needlework_fabric_and_piece_goods_stores"
    SHOE_REPAIR_HAT_CLEANING = "shoe_repair_hat_cleaning"
    SHOE_STORES = "shoe_stores"
    SMALL_APPLIANCE_REPAIR = "small_appliance_repair"
    SNOWMOBILE_DEALERS = "snowmobile_dealers"
    SPECIAL_TRADE_SERVICES = "special_trade_services"
    SPECIALTY_CLEANING = "specialty_cleaning"
    SPORTING_GOODS_STORES = "sporting_goods_stores"
    SPORTING_RECREATION_CAMPS = "sporting_recreation_camps"
    SPORTS_AND_RIDING_APPAREL_STORES = "sports_and_riding_apparel_stores"
    SPORTS_CLUBS_FIELDS = "sports_clubs_fields"
    STAMP_AND_COIN_STORES = "stamp_and_coin_stores"
    STATIONARY_OFFICE_SUPPLIES_PRINTING_AND_WRITING_PAPER = (
        "stationary_office_supplies_printing_and_writing_paper"
    )
    STATIONERY_STORES_OFFICE_AND_SCHOOL_SUPPLY_STORES = (
        "stationery_stores_office_and_school_supply_stores"
    )
    SWIMMING_POOLS_SALES = "swimming_pools_sales"
    T_UI_TRAVEL_GERMANY = "t_ui_travel_germany"
    TAILORS_ALTERATIONS = "tailors_alterations"
    TAX_PAYMENTS_GOVERNMENT_AGENCIES = "tax_payments_government_agencies"
    TAX_PREPARATION_SERVICES = "tax_preparation_services"
    TAXICABS_LIMOUSINES = "taxicabs_limousines"
    TELECOMMUNICATION_EQUIPMENT_AND_TELEPHONE_SALES = "telecommunication_equipment_and_telephone_sales"
    TELECOMMUNICATION_SERVICES = "telecommunication_services"
    TELEGRAPH_SERVICES = "telegraph_services"
    TENT_AND_AWNING_SHOPS = "tent_and_awning_shops"
    TESTING_LABORATORIES = "testing_laboratories"
    THEATRICAL_TICKET_AGENCIES = "theatrical_ticket_agencies"
    TIMESHARES = "timeshares"
    TIRE_RETREADING_AND_REPAIR = "tire_retreading_and_repair"
    TOLLS_BRIDGE_FEES = "tolls_bridge_fees"
    TOURIST_ATTRACTIONS_AND_EXHIBITS = "tourist_attractions_and_exhibits"
    TOWING_SERVICES = "towing_services"
    TRAILER_PARKS_CAMPGROUNDS = "trailer_parks_campgrounds"
    TRANSPORTATION_SERVICES = "transportation_services"
    TRAVEL_AGENCIES_TOUR_OPERATORS = "travel_agencies_tour_operators"
    TRUCK_STOP_ITERATION = "truck_stop_iteration"
    TRUCK_UTILITY_TRAILER_RENTALS = "truck_utility_trailer_rentals"
    TYPESETTING_PLATE_MAKING_AND_RELATED_SERVICES = "typesetting_plate_making_and_related_services"
    TYPEWRITER_STORES = "typewriter_stores"
    U_S_FEDERAL_GOVERNMENT_AGENCIES_OR_DEPARTMENTS = "u_s_federal_government_agencies_or_departments"
    UNIFORMS_COMMERCIAL_CLOTHING = "uniforms_commercial_clothing"
    USED_MERCHANDISE_AND_SECONDHAND_STORES = "used_merchandise_and_secondhand_stores"
    UTILITIES = "utilities"
    VARIETY_STORES = "variety_stores"
    VETERINARY_SERVICES = "veterinary_services"
    VIDEO_AMUSEMENT_GAME_SUPPLIES = "video_amusement_game_supplies"
    VIDEO_GAME_ARCADES = "video_game_arcades"
    VIDEO_TAPE_RENTAL_STORES = "video_tape_rental_stores"
    VOCATIONAL_TRADE_SCHOOLS = "vocational_trade_schools"
    WATCH_JEWELRY_REPAIR = "watch_jewelry_repair"
    WELDING_REPAIR = "welding_repair"
    WHOLESALE_CLUBS = "wholesale_clubs"
    WIG_AND_TOUPEE_STORES = "wig_and_toupee_stores"
    WIRES_MONEY_ORDERS = "wires_money_orders"
    WOMENS_ACCESSORY_AND_SPECIALTY_SHOPS = "womens_accessory_and_specialty_shops"
    WOMENS_READY_TO_WEAR_STORES = "womens_ready_to_wear_stores"
    WRECKING_AND_SALVAGE_YARDS = "wrecking_and_salvage_yards"

    @classmethod
    def default(cls) -> MerchantCategory:
        """The category used when none is given."""
        return cls.MISCELLANEOUS


_OPTIONAL_FIELDS = ("name", "city", "state", "country", "postal_code")


@dataclass(slots=True)
class MerchantData:
    """Details of the seller taking part in an issuing authorization."""

    network_id: str = ""
    category: MerchantCategory = MerchantCategory.MISCELLANEOUS
    name: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None

    def to_json(self) -> dict[str, str]:
        """The wire form; fields that are unset are left out."""
        data = {"network_id": self.network_id, "category": MerchantCategory(self.category).value}
        for field in _OPTIONAL_FIELDS:
            value = getattr(self, field)
            if value is not None:
                data[field] = value
        return data

    @classmethod
    def from_json(cls, data: Any) -> MerchantData:
        """Read the wire form, raising ValueError if it is malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"merchant data must be an object, got {data!r}")
        for required in ("network_id", "category"):
            if required not in data:
                raise ValueError(f"missing field `{required}`")
        network_id = data["network_id"]
        if not isinstance(network_id, str):
            raise ValueError(f"network_id must be a string, got {network_id!r}")
        try:
            category = MerchantCategory(data["category"])
        except ValueError:
            raise ValueError(f"unknown merchant category: {data['category']!r}") from None
        optional: dict[str, str | None] = {}
        for field in _OPTIONAL_FIELDS:
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field} must be a string, got {value!r}")
            optional[field] = value
        return cls(network_id=network_id, category=category, **optional)