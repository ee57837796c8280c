# =============================================================================
# core/catalog.py  -  Activity & Crop Catalogs
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the event types the planner can score against, and the crops the
#   "Pro" view knows about.  In the dashboard these came from static JSON;
#   here they are plain dicts of frozen dataclasses.
#
#   The interface is get_*/list_* by name or id.  Swapping in a database
#   later means changing this module only.
#
# IDEMPOTENCY:
#   Every function is a pure read and returns the same objects each call.
# =============================================================================

from typing import Optional, Union

from core.models import ActivityProfile, ActivityType, CropProfile, GrowthStage


# -----------------------------------------------------------------------------
# Event types
# -----------------------------------------------------------------------------
_ACTIVITY_TYPES: dict[str, ActivityType] = {
    a.type.lower(): a
    for a in (
        ActivityType(
            id=1,
            type="Mariage en plein air",
            duration=8,
            ideal_conditions=ActivityProfile(
                temp_min=20, temp_max=32, precipitation_max=20, wind_speed_max=20,
            ),
            description="Températures douces, ciel dégagé et vent faible",
        ),
        ActivityType(
            id=2,
            type="Match de football",
            duration=2,
            ideal_conditions=ActivityProfile(
                temp_min=15, temp_max=30, precipitation_max=40, wind_speed_max=25,
            ),
            description="Pas trop chaud, pluie légère tolérée",
        ),
        ActivityType(
            id=3,
            type="Récolte",
            duration=10,
            ideal_conditions=ActivityProfile(
                temp_min=18, temp_max=35, precipitation_max=20, wind_speed_max=30,
            ),
            description="Temps sec indispensable pour les grains",
        ),
        ActivityType(
            id=4,
            type="Semis",
            duration=6,
            ideal_conditions=ActivityProfile(
                temp_min=20, temp_max=34, precipitation_max=70, wind_speed_max=20,
            ),
            description="Sol humide bienvenu, éviter les vents forts",
        ),
        ActivityType(
            id=5,
            type="Traitement phytosanitaire",
            duration=4,
            ideal_conditions=ActivityProfile(
                temp_min=15, temp_max=28, precipitation_max=10, wind_speed_max=12,
            ),
            description="Vent faible et pas de pluie pour éviter la dérive",
        ),
        ActivityType(
            id=6,
            type="Marché hebdomadaire",
            duration=10,
            ideal_conditions=ActivityProfile(
                temp_min=18, temp_max=36, precipitation_max=30, wind_speed_max=30,
            ),
            description="Conditions supportables pour les étals en extérieur",
        ),
    )
}


# -----------------------------------------------------------------------------
# Crops
# -----------------------------------------------------------------------------
_CROPS: dict[str, CropProfile] = {
    c.name.lower(): c
    for c in (
        CropProfile(
            id=1,
            name="Mil",
            planting_period="Juin - Juillet",
            harvest_period="Septembre - Octobre",
            water_requirements="Faible",
            temp_min=25, temp_max=35,
            rainfall_min=300, rainfall_max=600,
            soil_moisture="Sol sableux bien drainé",
            growth_stages=(
                GrowthStage("Levée", "7-10 jours", "Arrosage léger si pas de pluie",
                            ("Oiseaux", "Sécheresse précoce")),
                GrowthStage("Tallage", "20-30 jours", "Modérée",
                            ("Mauvaises herbes",)),
                GrowthStage("Épiaison", "15-20 jours", "Régulière",
                            ("Mildiou", "Chenilles mineuses")),
                GrowthStage("Maturation", "20-25 jours", "Réduite", ("Oiseaux",)),
            ),
        ),
        CropProfile(
            id=2,
            name="Maïs",
            planting_period="Juin - Août",
            harvest_period="Septembre - Novembre",
            water_requirements="Élevé",
            temp_min=18, temp_max=32,
            rainfall_min=500, rainfall_max=800,
            soil_moisture="Sol profond et frais",
            growth_stages=(
                GrowthStage("Germination", "5-10 jours", "Sol maintenu humide",
                            ("Fonte des semis",)),
                GrowthStage("Croissance végétative", "30-45 jours", "Abondante",
                            ("Chenille légionnaire", "Stress hydrique")),
                GrowthStage("Floraison", "15-20 jours", "Critique - ne pas manquer",
                            ("Stress hydrique", "Chaleur excessive")),
                GrowthStage("Remplissage des grains", "30-40 jours", "Modérée",
                            ("Verse", "Charançons")),
            ),
        ),
        CropProfile(
            id=3,
            name="Arachide",
            planting_period="Juin - Juillet",
            harvest_period="Septembre - Octobre",
            water_requirements="Modéré",
            temp_min=22, temp_max=33,
            rainfall_min=400, rainfall_max=700,
            soil_moisture="Sol léger et meuble",
            growth_stages=(
                GrowthStage("Levée", "7-12 jours", "Légère",
                            ("Termites",)),
                GrowthStage("Floraison", "20-30 jours", "Régulière",
                            ("Cercosporiose",)),
                GrowthStage("Formation des gousses", "40-50 jours", "Modérée",
                            ("Aflatoxines", "Sécheresse")),
            ),
        ),
        CropProfile(
            id=4,
            name="Riz",
            planting_period="Juillet - Août",
            harvest_period="Novembre - Décembre",
            water_requirements="Élevé",
            temp_min=20, temp_max=35,
            rainfall_min=1000, rainfall_max=1800,
            soil_moisture="Sol argileux submergé",
            growth_stages=(
                GrowthStage("Pépinière", "20-25 jours", "Lame d'eau permanente",
                            ("Pyriculariose",)),
                GrowthStage("Tallage", "30-40 jours", "Lame d'eau 5-10 cm",
                            ("Foreurs de tiges",)),
                GrowthStage("Maturation", "30 jours", "Drainer avant récolte",
                            ("Oiseaux granivores",)),
            ),
        ),
    )
}


def _lookup(table: dict, key: Union[str, int]):
    if isinstance(key, int) or (isinstance(key, str) and key.strip().isdecimal()):
        wanted = int(key)
        for entry in table.values():
            if entry.id == wanted:
                return entry
        return None
    return table.get(key.strip().lower())


def get_activity_type(key: Union[str, int]) -> Optional[ActivityType]:
    """Find an event type by name (case-insensitive) or numeric id."""
    return _lookup(_ACTIVITY_TYPES, key)


def list_activity_types() -> list[ActivityType]:
    return sorted(_ACTIVITY_TYPES.values(), key=lambda a: a.id)


def get_crop(key: Union[str, int]) -> Optional[CropProfile]:
    """Find a crop by name (case-insensitive) or numeric id."""
    return _lookup(_CROPS, key)


def list_crops() -> list[CropProfile]:
    return sorted(_CROPS.values(), key=lambda c: c.id)
