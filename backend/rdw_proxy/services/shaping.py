"""
Pure transforms from raw RDW rows to the summary/details contract.

Nothing in here does I/O. Two rules apply to every field:

- numbers go through coerce(): empty, "0", 0 and missing all become None
  (upstream zero and absence cannot be told apart in the output)
- dates go through parse_date(): an 8-character YYYYMMDD string becomes
  YYYY-MM-DD, anything else becomes None; no calendar validation
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from ..schemas.rdw import (
    Axle,
    BasisDetails,
    Body,
    Color,
    Details,
    Fuel,
    Summary,
)

Row = Dict[str, Any]
Number = Union[int, float]


def coerce(value: Any) -> Optional[Number]:
    if not value or value == "0":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        # non-numeric text; the browser side has always received null here
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    if number.is_integer():
        return int(number)
    return number


def parse_date(value: Any) -> Optional[str]:
    if not isinstance(value, str) or len(value) != 8:
        return None
    return f"{value[0:4]}-{value[4:6]}-{value[6:8]}"


def _text(value: Any) -> Optional[str]:
    return value if value else None


def _objects(rows: Sequence[Any]) -> List[Row]:
    # RDW rows are JSON objects; anything else is passed through in _raw only
    return [row for row in rows if isinstance(row, dict)]


def first_row(rows: Optional[Sequence[Any]]) -> Row:
    if rows and isinstance(rows[0], dict):
        return rows[0]
    return {}


def _build_year(value: Any) -> Optional[Number]:
    if not value or not isinstance(value, str):
        return None
    return coerce(value[:4])


def _fuel_sort_key(fuel: Fuel) -> Number:
    # missing sequence numbers count as 0 and therefore sort first
    return fuel.volgnummer or 0


def shape_fuels(rows: Sequence[Any]) -> List[Fuel]:
    fuels = [
        Fuel(
            volgnummer=coerce(b.get("brandstof_volgnummer")),
            omschrijving=_text(b.get("brandstof_omschrijving")),
            verbruik_buiten_l_per_100km=coerce(b.get("brandstofverbruik_buiten")),
            verbruik_gecombineerd_l_per_100km=coerce(b.get("brandstofverbruik_gecombineerd")),
            verbruik_stad_l_per_100km=coerce(b.get("brandstofverbruik_stad")),
            co2_gecombineerd_g_km=coerce(b.get("co2_uitstoot_gecombineerd")),
            emissiecode_omschrijving=_text(b.get("emissiecode_omschrijving")),
            uitlaatemissieniveau=_text(b.get("uitlaatemissieniveau")),
            nettomaximumvermogen_kw=coerce(b.get("nettomaximumvermogen")),
            geluidsniveau_rijdend_db=coerce(b.get("geluidsniveau_rijdend")),
            geluidsniveau_stationair_db=coerce(b.get("geluidsniveau_stationair")),
            toerental_geluidsniveau=coerce(b.get("toerental_geluidsniveau")),
        )
        for b in _objects(rows)
    ]
    return sorted(fuels, key=_fuel_sort_key)


def shape_colors(rows: Sequence[Any]) -> List[Color]:
    return [
        Color(
            eerste_kleur=_text(k.get("eerste_kleur")),
            tweede_kleur=_text(k.get("tweede_kleur")),
        )
        for k in _objects(rows)
    ]


def shape_bodies(rows: Sequence[Any]) -> List[Body]:
    return [
        Body(
            carrosserie_volgnummer=coerce(c.get("carrosserie_volgnummer")),
            carrosserietype_omschrijving=_text(c.get("carrosserietype_omschrijving")),
        )
        for c in _objects(rows)
    ]


def shape_axles(rows: Sequence[Any]) -> List[Axle]:
    return [
        Axle(
            asnummer=coerce(a.get("asnummer")),
            spoorbreedte=coerce(a.get("spoorbreedte")),
            technische_max_aslast=coerce(a.get("technische_max_aslast")),
            wielbasis=coerce(a.get("wielbasis")),
            aantal_assen=coerce(a.get("aantal_assen")),
            aslast_technisch_toegestaan=coerce(a.get("aslast_technisch_toegestaan")),
        )
        for a in _objects(rows)
    ]


def shape_summary(
    plate: str,
    basis: Row,
    fuel_rows: Sequence[Any],
    color_rows: Sequence[Any],
) -> Summary:
    fuels = shape_fuels(fuel_rows)
    first_color = first_row(color_rows)

    return Summary(
        kenteken=plate,
        merk=_text(basis.get("merk")),
        handelsbenaming=_text(basis.get("handelsbenaming")),
        voertuigsoort=_text(basis.get("voertuigsoort")),
        bouwjaar=_build_year(basis.get("datum_eerste_toelating")),
        datum_eerste_toelating=parse_date(basis.get("datum_eerste_toelating")),
        apk_vervaldatum=parse_date(basis.get("vervaldatum_apk")),
        kleur=_text(first_color.get("eerste_kleur")) or _text(basis.get("eerste_kleur")),
        tweede_kleur=_text(first_color.get("tweede_kleur")),
        brandstof=fuels[0].omschrijving if fuels else None,
        zitplaatsen=coerce(basis.get("aantal_zitplaatsen")),
        deuren=coerce(basis.get("aantal_deuren")),
        bpm_bruto=coerce(basis.get("bruto_bpm")),
        massa_ledig_kg=coerce(basis.get("massa_ledig_voertuig")),
        massa_rijklaar_kg=coerce(basis.get("massa_rijklaar")),
        trekgewicht_ongeremd_kg=coerce(basis.get("maximum_massa_trekken_ongeremd")),
        trekgewicht_geremd_kg=coerce(basis.get("maximum_trekken_massa_geremd")),
    )


def shape_basis(basis: Row) -> BasisDetails:
    return BasisDetails(
        voertuigsoort=_text(basis.get("voertuigsoort")),
        merk=_text(basis.get("merk")),
        handelsbenaming=_text(basis.get("handelsbenaming")),
        inrichting=_text(basis.get("inrichting")),
        catalogusprijs=coerce(basis.get("catalogusprijs")),
        cilinders=coerce(basis.get("aantal_cilinders")),
        cilinderinhoud_cc=coerce(basis.get("cilinderinhoud")),
        lengte_cm=coerce(basis.get("lengte")),
        breedte_cm=coerce(basis.get("breedte")),
        hoogte_cm=coerce(basis.get("hoogte_voertuig")),
        wielbasis_cm=coerce(basis.get("wielbasis")),
        eu_voertuigcategorie=_text(basis.get("europese_voertuigcategorie")),
        zuinigheidsclassificatie=_text(basis.get("zuinigheidsclassificatie")),
        type=_text(basis.get("type")),
        variant=_text(basis.get("variant")),
        uitvoering=_text(basis.get("uitvoering")),
        typegoedkeuringsnummer=_text(basis.get("typegoedkeuringsnummer")),
        datum_eerste_toelating=parse_date(basis.get("datum_eerste_toelating")),
        datum_tenaamstelling=parse_date(basis.get("datum_tenaamstelling")),
        datum_eerste_tenaamstelling_in_nederland=parse_date(
            basis.get("datum_eerste_tenaamstelling_in_nederland")
        ),
        apk_vervaldatum=parse_date(basis.get("vervaldatum_apk")),
        wam_verzekerd=_text(basis.get("wam_verzekerd")),
        export_indicator=_text(basis.get("export_indicator")),
        openstaande_terugroepactie_indicator=_text(basis.get("openstaande_terugroepactie_indicator")),
        taxi_indicator=_text(basis.get("taxi_indicator")),
        tellerstandoordeel=_text(basis.get("tellerstandoordeel")),
    )


def shape_details(
    basis: Row,
    fuel_rows: Sequence[Any],
    color_rows: Sequence[Any],
    body_rows: Optional[Sequence[Any]] = None,
    body_specific_rows: Optional[Sequence[Any]] = None,
    axle_rows: Optional[Sequence[Any]] = None,
    warnings: Optional[List[str]] = None,
) -> Details:
    return Details(
        basis=shape_basis(basis),
        brandstoffen=shape_fuels(fuel_rows),
        kleuren=shape_colors(color_rows),
        carrosserie=shape_bodies(body_rows or []),
        carrosserie_specifiek=shape_bodies(body_specific_rows or []),
        assen=shape_axles(axle_rows or []),
        warnings=list(warnings or []),
    )
