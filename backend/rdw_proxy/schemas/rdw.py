from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class Summary(BaseModel):
    """
    Quick-view of a vehicle: basis record plus the first fuel and color rows.
    Every field is nullable; zero/empty upstream values come through as None.
    """
    kenteken: str
    merk: Optional[str] = None
    handelsbenaming: Optional[str] = None
    voertuigsoort: Optional[str] = None
    bouwjaar: Optional[Number] = None
    datum_eerste_toelating: Optional[str] = None
    apk_vervaldatum: Optional[str] = None
    kleur: Optional[str] = None
    tweede_kleur: Optional[str] = None
    brandstof: Optional[str] = None
    zitplaatsen: Optional[Number] = None
    deuren: Optional[Number] = None
    bpm_bruto: Optional[Number] = None
    massa_ledig_kg: Optional[Number] = None
    massa_rijklaar_kg: Optional[Number] = None
    trekgewicht_ongeremd_kg: Optional[Number] = None
    trekgewicht_geremd_kg: Optional[Number] = None


class BasisDetails(BaseModel):
    voertuigsoort: Optional[str] = None
    merk: Optional[str] = None
    handelsbenaming: Optional[str] = None
    inrichting: Optional[str] = None
    catalogusprijs: Optional[Number] = None
    cilinders: Optional[Number] = None
    cilinderinhoud_cc: Optional[Number] = None
    lengte_cm: Optional[Number] = None
    breedte_cm: Optional[Number] = None
    hoogte_cm: Optional[Number] = None
    wielbasis_cm: Optional[Number] = None
    eu_voertuigcategorie: Optional[str] = None
    zuinigheidsclassificatie: Optional[str] = None
    type: Optional[str] = None
    variant: Optional[str] = None
    uitvoering: Optional[str] = None
    typegoedkeuringsnummer: Optional[str] = None
    datum_eerste_toelating: Optional[str] = None
    datum_tenaamstelling: Optional[str] = None
    datum_eerste_tenaamstelling_in_nederland: Optional[str] = None
    apk_vervaldatum: Optional[str] = None
    wam_verzekerd: Optional[str] = None
    export_indicator: Optional[str] = None
    openstaande_terugroepactie_indicator: Optional[str] = None
    taxi_indicator: Optional[str] = None
    tellerstandoordeel: Optional[str] = None


class Fuel(BaseModel):
    volgnummer: Optional[Number] = None
    omschrijving: Optional[str] = None
    verbruik_buiten_l_per_100km: Optional[Number] = None
    verbruik_gecombineerd_l_per_100km: Optional[Number] = None
    verbruik_stad_l_per_100km: Optional[Number] = None
    co2_gecombineerd_g_km: Optional[Number] = None
    emissiecode_omschrijving: Optional[str] = None
    uitlaatemissieniveau: Optional[str] = None
    nettomaximumvermogen_kw: Optional[Number] = None
    geluidsniveau_rijdend_db: Optional[Number] = None
    geluidsniveau_stationair_db: Optional[Number] = None
    toerental_geluidsniveau: Optional[Number] = None


class Color(BaseModel):
    eerste_kleur: Optional[str] = None
    tweede_kleur: Optional[str] = None


class Body(BaseModel):
    carrosserie_volgnummer: Optional[Number] = None
    carrosserietype_omschrijving: Optional[str] = None


class Axle(BaseModel):
    asnummer: Optional[Number] = None
    spoorbreedte: Optional[Number] = None
    technische_max_aslast: Optional[Number] = None
    wielbasis: Optional[Number] = None
    aantal_assen: Optional[Number] = None
    aslast_technisch_toegestaan: Optional[Number] = None


class Details(BaseModel):
    basis: BasisDetails
    brandstoffen: List[Fuel] = []
    kleuren: List[Color] = []
    carrosserie: List[Body] = []
    carrosserie_specifiek: List[Body] = []
    assen: List[Axle] = []
    warnings: List[str] = []


class RdwLookupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: Summary
    details: Details
    raw: Optional[Dict[str, Optional[List[Any]]]] = Field(default=None, alias="_raw")


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
