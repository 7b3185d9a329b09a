"""
Reference catalog
Provinces, cities and display labels used by the search screens.
"""

from typing import Optional

from imoveis.schemas.listing import Amenity, ListingKind, PropertyKind


class Catalog:
    """
    Reference data

    Province/city containment here is advisory. The filter engine never
    consults the catalog, so a stale city/province pair filters to nothing
    instead of being rejected.
    """

    PROVINCES = {
        "maputo": "Maputo",
        "gaza": "Gaza",
        "inhambane": "Inhambane",
        "manica": "Manica",
        "sofala": "Sofala",
        "tete": "Tete",
        "zambezia": "Zambézia",
        "nampula": "Nampula",
        "cabo_delgado": "Cabo Delgado",
        "niassa": "Niassa",
    }

    # only the provinces with published cities so far
    CITIES = {
        "maputo": {
            "maputo_city": "Cidade de Maputo",
            "matola": "Matola",
            "boane": "Boane",
            "marracuene": "Marracuene",
        },
        "gaza": {
            "xai_xai": "Xai-Xai",
            "chokwe": "Chókwè",
        },
    }

    PROPERTY_KIND_LABELS = {
        PropertyKind.HOUSE: "Casa",
        PropertyKind.APARTMENT: "Apartamento",
        PropertyKind.LAND: "Terreno",
        PropertyKind.OFFICE: "Escritório",
        PropertyKind.COMMERCIAL: "Comercial",
        PropertyKind.WAREHOUSE: "Armazém",
        PropertyKind.FARM: "Quinta",
    }

    LISTING_KIND_LABELS = {
        ListingKind.SALE: "Venda",
        ListingKind.RENT: "Arrendamento",
    }

    AMENITY_LABELS = {
        Amenity.POOL: "Piscina",
        Amenity.GARAGE: "Garagem",
        Amenity.GARDEN: "Jardim",
        Amenity.SECURITY: "Segurança",
        Amenity.FURNISHED: "Mobilado",
        Amenity.AIR_CONDITIONING: "Ar Condicionado",
        Amenity.BALCONY: "Varanda",
        Amenity.ELEVATOR: "Elevador",
    }

    def get_cities(self, province: str) -> list[dict]:
        """Cities of a province as [{id, label}], empty if unknown."""
        cities = self.CITIES.get(province, {})
        return [{"id": city_id, "label": label} for city_id, label in cities.items()]

    def is_city_in_province(self, province: str, city: str) -> bool:
        return city in self.CITIES.get(province, {})

    def get_province_label(self, province: str) -> Optional[str]:
        return self.PROVINCES.get(province)

    def get_city_label(self, city: str) -> Optional[str]:
        for cities in self.CITIES.values():
            if city in cities:
                return cities[city]
        return None

    def as_dict(self) -> dict:
        """Whole catalog in a JSON friendly shape"""
        return {
            "provinces": [
                {"id": province_id, "label": label}
                for province_id, label in self.PROVINCES.items()
            ],
            "cities": {
                province_id: self.get_cities(province_id)
                for province_id in self.CITIES
            },
            "property_kinds": _labels(self.PROPERTY_KIND_LABELS),
            "listing_kinds": _labels(self.LISTING_KIND_LABELS),
            "amenities": _labels(self.AMENITY_LABELS),
        }


def _labels(mapping: dict) -> list[dict]:
    return [{"id": key.value, "label": label} for key, label in mapping.items()]


# Global instance
_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Shared catalog instance"""
    global _catalog
    if _catalog is None:
        _catalog = Catalog()
    return _catalog
