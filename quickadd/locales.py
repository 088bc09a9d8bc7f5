"""Per-locale keyword tables for the task-line parser.

Tables are static and keyed by an ISO-639-1 code. ``get_language_config``
is the single lookup path; unknown codes resolve to English.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

DEFAULT_LOCALE = "en"

WEEKDAY_CODES = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")


@dataclass(frozen=True)
class LanguageConfig:
    """Keyword tables used by the date, recurrence, estimate and fallback phases."""

    code: str
    name: str
    # dates
    due_cues: Tuple[str, ...] = ()
    scheduled_cues: Tuple[str, ...] = ()
    relative_days: Dict[str, int] = field(default_factory=dict)
    now_words: Tuple[str, ...] = ()
    next_words: Tuple[str, ...] = ()
    this_words: Tuple[str, ...] = ()
    in_words: Tuple[str, ...] = ()
    day_units: Tuple[str, ...] = ()
    week_units: Tuple[str, ...] = ()
    weekdays: Dict[str, int] = field(default_factory=dict)
    months: Dict[str, int] = field(default_factory=dict)
    time_cues: Tuple[str, ...] = ()
    uses_meridiem: bool = False
    day_first: bool = True
    month_joiners: Tuple[str, ...] = ()
    range_starts: Tuple[str, ...] = ()
    range_joiners: Tuple[str, ...] = ()
    # recurrence
    frequencies: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    every_words: Tuple[str, ...] = ()
    other_words: Tuple[str, ...] = ()
    plural_weekdays: Dict[str, int] = field(default_factory=dict)
    ordinals: Dict[str, int] = field(default_factory=dict)
    periods: Dict[str, str] = field(default_factory=dict)
    # estimates
    hour_units: Tuple[str, ...] = ()
    minute_units: Tuple[str, ...] = ()
    # built-in lexicon fallbacks, in priority order
    fallback_status: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    fallback_priority: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()


def _periods(day: Tuple[str, ...], week: Tuple[str, ...], month: Tuple[str, ...], year: Tuple[str, ...]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    for words, freq in ((day, "DAILY"), (week, "WEEKLY"), (month, "MONTHLY"), (year, "YEARLY")):
        for word in words:
            table[word] = freq
    return table


# ---------------------------------------------------------------------------
# English
# ---------------------------------------------------------------------------
_EN = LanguageConfig(
    code="en",
    name="English",
    due_cues=("due", "deadline", "must be done by", "by"),
    scheduled_cues=("scheduled for", "start on", "begin on", "work on", "on"),
    relative_days={"today": 0, "tonight": 0, "tomorrow": 1, "yesterday": -1, "day after tomorrow": 2},
    now_words=("now", "right now"),
    next_words=("next",),
    this_words=("this", "coming"),
    in_words=("in",),
    day_units=("day", "days"),
    week_units=("week", "weeks"),
    weekdays={
        "monday": 0, "tuesday": 1, "wednesday": 2, "thursday": 3,
        "friday": 4, "saturday": 5, "sunday": 6,
    },
    months={
        "january": 1, "jan": 1,
        "february": 2, "feb": 2,
        "march": 3, "mar": 3,
        "april": 4, "apr": 4,
        "may": 5,
        "june": 6, "jun": 6,
        "july": 7, "jul": 7,
        "august": 8, "aug": 8,
        "september": 9, "sept": 9, "sep": 9,
        "october": 10, "oct": 10,
        "november": 11, "nov": 11,
        "december": 12, "dec": 12,
    },
    time_cues=("at",),
    uses_meridiem=True,
    day_first=False,
    month_joiners=("of",),
    range_starts=("from",),
    range_joiners=("to", "until", "till", "through"),
    frequencies={
        "DAILY": ("daily", "every day"),
        "WEEKLY": ("weekly", "every week"),
        "MONTHLY": ("monthly", "every month"),
        "YEARLY": ("yearly", "annually", "every year"),
    },
    every_words=("every",),
    other_words=("other",),
    plural_weekdays={
        "mondays": 0, "tuesdays": 1, "wednesdays": 2, "thursdays": 3,
        "fridays": 4, "saturdays": 5, "sundays": 6,
    },
    ordinals={"first": 1, "second": 2, "third": 3, "fourth": 4, "last": -1},
    periods=_periods(("day", "days"), ("week", "weeks"), ("month", "months"), ("year", "years")),
    hour_units=("h", "hr", "hrs", "hour", "hours"),
    minute_units=("m", "min", "mins", "minute", "minutes"),
    fallback_status=(
        ("open", ("todo", "to do", "open")),
        ("in-progress", ("in progress", "in-progress", "doing")),
        ("done", ("done", "completed", "finished")),
        ("cancelled", ("cancelled", "canceled")),
        ("waiting", ("waiting", "blocked", "on hold")),
    ),
    fallback_priority=(
        ("urgent", ("urgent", "critical", "highest")),
        ("high", ("high", "important")),
        ("normal", ("medium", "normal")),
        ("low", ("low", "minor")),
    ),
)

# ---------------------------------------------------------------------------
# German
# ---------------------------------------------------------------------------
_DE = LanguageConfig(
    code="de",
    name="Deutsch",
    due_cues=("fällig", "termin", "abgabe", "deadline", "bis zum", "bis"),
    scheduled_cues=("geplant für", "geplant am", "beginnen am", "anfangen am", "am"),
    relative_days={"heute": 0, "morgen": 1, "übermorgen": 2, "gestern": -1},
    now_words=("jetzt", "sofort"),
    next_words=("nächsten", "nächste", "nächster"),
    this_words=("diesen", "diese", "dieser"),
    in_words=("in",),
    day_units=("tag", "tagen"),
    week_units=("woche", "wochen"),
    weekdays={
        "montag": 0, "dienstag": 1, "mittwoch": 2, "donnerstag": 3,
        "freitag": 4, "samstag": 5, "sonntag": 6,
    },
    months={
        "januar": 1, "jan": 1, "februar": 2, "feb": 2, "märz": 3, "april": 4, "apr": 4,
        "mai": 5, "juni": 6, "juli": 7, "august": 8, "aug": 8, "september": 9, "sept": 9,
        "oktober": 10, "okt": 10, "november": 11, "nov": 11, "dezember": 12, "dez": 12,
    },
    time_cues=("um",),
    range_starts=("von", "vom"),
    range_joiners=("bis",),
    frequencies={
        "DAILY": ("täglich", "jeden tag", "alle tage"),
        "WEEKLY": ("wöchentlich", "jede woche", "alle wochen"),
        "MONTHLY": ("monatlich", "jeden monat", "alle monate"),
        "YEARLY": ("jährlich", "jedes jahr", "alle jahre"),
    },
    every_words=("jede", "jeden", "jedes", "alle"),
    other_words=("andere", "anderen", "anderes"),
    plural_weekdays={
        "montags": 0, "dienstags": 1, "mittwochs": 2, "donnerstags": 3,
        "freitags": 4, "samstags": 5, "sonntags": 6,
    },
    ordinals={
        "erste": 1, "ersten": 1, "erster": 1,
        "zweite": 2, "zweiten": 2, "zweiter": 2,
        "dritte": 3, "dritten": 3, "dritter": 3,
        "vierte": 4, "vierten": 4, "vierter": 4,
        "letzte": -1, "letzten": -1, "letzter": -1,
    },
    periods=_periods(("tag", "tage"), ("woche", "wochen"), ("monat", "monate"), ("jahr", "jahre")),
    hour_units=("h", "std", "stunde", "stunden"),
    minute_units=("m", "min", "minute", "minuten"),
    fallback_status=(
        ("open", ("offen", "zu erledigen", "ausstehend", "todo")),
        ("in-progress", ("in bearbeitung", "wird bearbeitet", "läuft", "in arbeit")),
        ("done", ("erledigt", "fertig", "abgeschlossen", "gemacht")),
        ("cancelled", ("abgebrochen", "storniert", "abgesagt")),
        ("waiting", ("wartend", "warten", "blockiert", "pausiert")),
    ),
    fallback_priority=(
        ("urgent", ("dringend", "eilig", "kritisch", "höchste")),
        ("high", ("hoch", "hohe", "wichtig", "prioritär")),
        ("normal", ("normal", "mittel", "mittlere", "standard")),
        ("low", ("niedrig", "niedrige", "gering", "geringe")),
    ),
)

# ---------------------------------------------------------------------------
# Danish
# ---------------------------------------------------------------------------
_DA = LanguageConfig(
    code="da",
    name="Dansk",
    due_cues=("frist", "senest", "deadline", "inden"),
    scheduled_cues=("planlagt til", "planlagt", "start"),
    relative_days={
        "i dag": 0, "idag": 0,
        "i morgen": 1, "imorgen": 1,
        "i overmorgen": 2, "overmorgen": 2,
        "i går": -1, "igår": -1,
    },
    now_words=("nu",),
    next_words=("næste",),
    this_words=("denne", "på"),
    in_words=("om",),
    day_units=("dag", "dage"),
    week_units=("uge", "uger"),
    weekdays={
        "mandag": 0, "tirsdag": 1, "onsdag": 2, "torsdag": 3,
        "fredag": 4, "lørdag": 5, "søndag": 6,
    },
    months={
        "januar": 1, "jan": 1, "februar": 2, "feb": 2, "marts": 3, "april": 4, "apr": 4,
        "maj": 5, "juni": 6, "juli": 7, "august": 8, "aug": 8, "september": 9, "sep": 9,
        "oktober": 10, "okt": 10, "november": 11, "nov": 11, "december": 12, "dec": 12,
    },
    time_cues=("kl.", "kl"),
    range_starts=("fra",),
    range_joiners=("til",),
    frequencies={
        "DAILY": ("dagligt", "daglig", "hver dag"),
        "WEEKLY": ("ugentligt", "ugentlig", "hver uge"),
        "MONTHLY": ("månedligt", "månedlig", "hver måned"),
        "YEARLY": ("årligt", "årlig", "hvert år"),
    },
    every_words=("hver", "hvert"),
    other_words=("anden", "andet"),
    plural_weekdays={},
    ordinals={"første": 1, "anden": 2, "tredje": 3, "fjerde": 4, "sidste": -1},
    periods=_periods(("dag", "dage"), ("uge", "uger"), ("måned", "måneder"), ("år",)),
    hour_units=("t", "time", "timer"),
    minute_units=("m", "min", "minut", "minutter"),
    fallback_status=(
        ("open", ("åben", "at gøre", "todo")),
        ("in-progress", ("i gang", "igang", "under arbejde")),
        ("done", ("færdig", "udført", "afsluttet")),
        ("cancelled", ("annulleret", "aflyst")),
        ("waiting", ("venter", "blokeret", "på hold")),
    ),
    fallback_priority=(
        ("urgent", ("haster", "kritisk", "akut")),
        ("high", ("høj", "vigtig")),
        ("normal", ("normal", "middel")),
        ("low", ("lav", "mindre vigtig")),
    ),
)

# ---------------------------------------------------------------------------
# Spanish
# ---------------------------------------------------------------------------
_ES = LanguageConfig(
    code="es",
    name="Español",
    due_cues=("vence", "fecha límite", "debe terminarse", "para el", "antes del"),
    scheduled_cues=("programado para", "programado el", "comenzar el", "empezar el", "trabajar en", "el"),
    relative_days={"hoy": 0, "esta noche": 0, "mañana": 1, "pasado mañana": 2, "ayer": -1},
    now_words=("ahora", "ahora mismo"),
    next_words=("próximo", "próxima"),
    this_words=("este", "esta"),
    in_words=("en", "dentro de"),
    day_units=("día", "días"),
    week_units=("semana", "semanas"),
    weekdays={
        "lunes": 0, "martes": 1, "miércoles": 2, "miercoles": 2, "jueves": 3,
        "viernes": 4, "sábado": 5, "sabado": 5, "domingo": 6,
    },
    months={
        "enero": 1, "ene": 1, "febrero": 2, "feb": 2, "marzo": 3, "abril": 4, "abr": 4,
        "mayo": 5, "junio": 6, "julio": 7, "agosto": 8, "ago": 8, "septiembre": 9, "setiembre": 9,
        "sept": 9, "octubre": 10, "oct": 10, "noviembre": 11, "nov": 11, "diciembre": 12, "dic": 12,
    },
    time_cues=("a las", "a la"),
    month_joiners=("de",),
    range_starts=("desde", "del"),
    range_joiners=("hasta el", "hasta la", "hasta", "al", "a"),
    frequencies={
        "DAILY": ("diario", "diaria", "diariamente", "cada día", "todos los días", "a diario"),
        "WEEKLY": ("semanal", "semanalmente", "cada semana", "todas las semanas", "por semana"),
        "MONTHLY": ("mensual", "mensualmente", "cada mes", "todos los meses", "por mes"),
        "YEARLY": ("anual", "anualmente", "cada año", "todos los años", "por año"),
    },
    every_words=("cada", "todos los", "todas las"),
    other_words=("otro", "otra"),
    # "lunes" to "viernes" have no distinct plural form
    plural_weekdays={"sábados": 5, "domingos": 6},
    ordinals={
        "primer": 1, "primero": 1, "primera": 1,
        "segundo": 2, "segunda": 2,
        "tercer": 3, "tercero": 3, "tercera": 3,
        "cuarto": 4, "cuarta": 4,
        "último": -1, "última": -1,
    },
    periods=_periods(("día", "días"), ("semana", "semanas"), ("mes", "meses"), ("año", "años")),
    hour_units=("h", "hr", "hrs", "hora", "horas"),
    minute_units=("m", "min", "mins", "minuto", "minutos"),
    fallback_status=(
        ("open", ("pendiente", "por hacer", "abierto", "todo")),
        ("in-progress", ("en progreso", "en curso", "haciendo", "trabajando")),
        ("done", ("hecho", "terminado", "completado", "finalizado")),
        ("cancelled", ("cancelado", "anulado")),
        ("waiting", ("esperando", "bloqueado", "en espera")),
    ),
    fallback_priority=(
        ("urgent", ("urgente", "crítico", "crítica", "máximo", "máxima", "prioritario", "prioritaria")),
        ("high", ("alto", "alta", "importante", "elevado", "elevada")),
        ("normal", ("medio", "media", "normal", "regular", "estándar")),
        ("low", ("bajo", "baja", "menor", "mínimo", "mínima")),
    ),
)

# ---------------------------------------------------------------------------
# French
# ---------------------------------------------------------------------------
_FR = LanguageConfig(
    code="fr",
    name="Français",
    due_cues=("échéance", "date limite", "doit être terminé", "pour le", "avant le"),
    scheduled_cues=("programmé pour", "programmé le", "commencer le", "débuter le", "travailler sur", "le"),
    relative_days={"aujourd'hui": 0, "ce soir": 0, "demain": 1, "après-demain": 2, "hier": -1},
    now_words=("maintenant", "tout de suite"),
    next_words=("prochain", "prochaine"),
    this_words=("ce", "cette"),
    in_words=("dans",),
    day_units=("jour", "jours"),
    week_units=("semaine", "semaines"),
    weekdays={
        "lundi": 0, "mardi": 1, "mercredi": 2, "jeudi": 3,
        "vendredi": 4, "samedi": 5, "dimanche": 6,
    },
    months={
        "janvier": 1, "janv": 1, "février": 2, "fevrier": 2, "févr": 2, "mars": 3, "avril": 4, "avr": 4,
        "mai": 5, "juin": 6, "juillet": 7, "juil": 7, "août": 8, "aout": 8, "septembre": 9, "sept": 9,
        "octobre": 10, "oct": 10, "novembre": 11, "nov": 11, "décembre": 12, "decembre": 12, "déc": 12,
    },
    time_cues=("à",),
    range_starts=("du", "de"),
    range_joiners=("jusqu'au", "jusqu'à", "au", "à"),
    frequencies={
        "DAILY": (
            "quotidien", "quotidienne", "quotidiennement", "chaque jour",
            "tous les jours", "journalier", "journalière",
        ),
        "WEEKLY": ("hebdomadaire", "chaque semaine", "toutes les semaines", "par semaine"),
        "MONTHLY": ("mensuel", "mensuelle", "mensuellement", "chaque mois", "tous les mois", "par mois"),
        "YEARLY": ("annuel", "annuelle", "annuellement", "chaque année", "tous les ans", "par an", "par année"),
    },
    every_words=("chaque", "tous les", "toutes les"),
    other_words=("autre", "autres"),
    ordinals={
        "premier": 1, "première": 1,
        "deuxième": 2, "second": 2, "seconde": 2,
        "troisième": 3,
        "quatrième": 4,
        "dernier": -1, "dernière": -1,
    },
    periods=_periods(("jour", "jours"), ("semaine", "semaines"), ("mois",), ("an", "ans", "année", "années")),
    hour_units=("h", "hr", "hrs", "heure", "heures"),
    minute_units=("m", "min", "mins", "minute", "minutes"),
    fallback_status=(
        ("open", ("à faire", "ouvert", "todo")),
        ("in-progress", ("en cours", "en progression", "en train de faire")),
        ("done", ("terminé", "fini", "accompli", "fait")),
        ("cancelled", ("annulé", "abandonné")),
        ("waiting", ("en attente", "bloqué", "suspendu")),
    ),
    fallback_priority=(
        ("urgent", ("urgent", "urgente", "critique", "maximum", "prioritaire")),
        ("high", ("élevé", "élevée", "haut", "haute", "important", "importante", "supérieur", "supérieure")),
        ("normal", ("moyen", "moyenne", "normal", "normale", "standard", "régulier", "régulière")),
        ("low", ("faible", "bas", "basse", "mineur", "mineure", "minimum")),
    ),
)

# ---------------------------------------------------------------------------
# Italian
# ---------------------------------------------------------------------------
_IT = LanguageConfig(
    code="it",
    name="Italiano",
    due_cues=("scadenza", "entro il", "entro", "deve essere fatto entro", "per il", "termine"),
    scheduled_cues=("programmato per", "programmato il", "iniziare il", "lavorare su", "il", "per"),
    relative_days={"oggi": 0, "stasera": 0, "domani": 1, "dopodomani": 2, "ieri": -1},
    now_words=("adesso", "subito"),
    next_words=("prossimo", "prossima"),
    this_words=("questo", "questa"),
    in_words=("tra", "fra"),
    day_units=("giorno", "giorni"),
    week_units=("settimana", "settimane"),
    weekdays={
        "lunedì": 0, "lunedi": 0, "martedì": 1, "martedi": 1, "mercoledì": 2, "mercoledi": 2,
        "giovedì": 3, "giovedi": 3, "venerdì": 4, "venerdi": 4, "sabato": 5, "domenica": 6,
    },
    months={
        "gennaio": 1, "gen": 1, "febbraio": 2, "feb": 2, "marzo": 3, "aprile": 4, "apr": 4,
        "maggio": 5, "mag": 5, "giugno": 6, "giu": 6, "luglio": 7, "lug": 7, "agosto": 8, "ago": 8,
        "settembre": 9, "set": 9, "ottobre": 10, "ott": 10, "novembre": 11, "nov": 11, "dicembre": 12, "dic": 12,
    },
    time_cues=("alle ore", "alle", "ore"),
    range_starts=("da", "dal"),
    range_joiners=("fino al", "fino a", "al", "a"),
    frequencies={
        "DAILY": ("giornaliero", "giornaliera", "quotidiano", "quotidiana", "ogni giorno", "tutti i giorni", "giornalmente"),
        "WEEKLY": ("settimanale", "ogni settimana", "tutte le settimane", "settimanalmente", "alla settimana"),
        "MONTHLY": ("mensile", "ogni mese", "tutti i mesi", "mensilmente", "al mese"),
        "YEARLY": ("annuale", "ogni anno", "tutti gli anni", "annualmente", "all'anno"),
    },
    every_words=("ogni", "tutti i", "tutte le"),
    other_words=("altro", "altra", "altri", "altre"),
    # weekday names ending in -ì do not change in the plural
    plural_weekdays={"sabati": 5, "domeniche": 6},
    ordinals={
        "primo": 1, "prima": 1,
        "secondo": 2, "seconda": 2,
        "terzo": 3, "terza": 3,
        "quarto": 4, "quarta": 4,
        "ultimo": -1, "ultima": -1,
    },
    periods=_periods(("giorno", "giorni"), ("settimana", "settimane"), ("mese", "mesi"), ("anno", "anni")),
    hour_units=("h", "hr", "ora", "ore"),
    minute_units=("m", "min", "minuto", "minuti"),
    fallback_status=(
        ("open", ("da fare", "aperto", "pendente", "todo", "in sospeso")),
        ("in-progress", ("in corso", "in progresso", "facendo", "lavorando")),
        ("done", ("fatto", "completato", "finito", "terminato", "chiuso")),
        ("cancelled", ("cancellato", "annullato", "rimosso")),
        ("waiting", ("in attesa", "aspettando", "bloccato", "fermo")),
    ),
    fallback_priority=(
        ("urgent", ("urgente", "critico", "critica", "massimo", "massima", "prioritario", "prioritaria")),
        ("high", ("alto", "alta", "importante", "elevato", "elevata")),
        ("normal", ("medio", "media", "normale", "regolare", "standard")),
        ("low", ("basso", "bassa", "minore", "minimo", "minima")),
    ),
)

# ---------------------------------------------------------------------------
# Dutch
# ---------------------------------------------------------------------------
_NL = LanguageConfig(
    code="nl",
    name="Nederlands",
    due_cues=("vervalt op", "deadline", "moet klaar zijn op", "tegen", "uiterlijk", "voor"),
    scheduled_cues=("gepland voor", "gepland op", "beginnen op", "werken aan", "op"),
    relative_days={"vandaag": 0, "vanavond": 0, "morgen": 1, "overmorgen": 2, "gisteren": -1},
    now_words=("nu",),
    next_words=("volgende", "komende"),
    this_words=("deze",),
    in_words=("over", "binnen"),
    day_units=("dag", "dagen"),
    week_units=("week", "weken"),
    weekdays={
        "maandag": 0, "dinsdag": 1, "woensdag": 2, "donderdag": 3,
        "vrijdag": 4, "zaterdag": 5, "zondag": 6,
    },
    months={
        "januari": 1, "jan": 1, "februari": 2, "feb": 2, "maart": 3, "mrt": 3, "april": 4, "apr": 4,
        "mei": 5, "juni": 6, "jun": 6, "juli": 7, "jul": 7, "augustus": 8, "aug": 8, "september": 9,
        "sept": 9, "sep": 9, "oktober": 10, "okt": 10, "november": 11, "nov": 11, "december": 12, "dec": 12,
    },
    time_cues=("om",),
    range_starts=("vanaf", "van"),
    range_joiners=("tot en met", "t/m", "tot"),
    frequencies={
        "DAILY": ("dagelijks", "elke dag", "alle dagen", "per dag"),
        "WEEKLY": ("wekelijks", "elke week", "alle weken", "per week"),
        "MONTHLY": ("maandelijks", "elke maand", "alle maanden", "per maand"),
        "YEARLY": ("jaarlijks", "elk jaar", "alle jaren", "per jaar"),
    },
    every_words=("elke", "elk", "alle", "iedere"),
    other_words=("andere", "ander"),
    plural_weekdays={
        "maandagen": 0, "dinsdagen": 1, "woensdagen": 2, "donderdagen": 3,
        "vrijdagen": 4, "zaterdagen": 5, "zondagen": 6,
    },
    ordinals={"eerste": 1, "tweede": 2, "derde": 3, "vierde": 4, "laatste": -1},
    periods=_periods(("dag", "dagen"), ("week", "weken"), ("maand", "maanden"), ("jaar", "jaren")),
    hour_units=("u", "uur", "uren", "h"),
    minute_units=("m", "min", "minuut", "minuten"),
    fallback_status=(
        ("open", ("te doen", "open", "nog te doen", "todo", "openstaand")),
        ("in-progress", ("bezig", "in behandeling", "aan het werk", "lopend", "in uitvoering")),
        ("done", ("klaar", "voltooid", "gedaan", "afgerond", "gesloten")),
        ("cancelled", ("geannuleerd", "afgezegd", "ingetrokken")),
        ("waiting", ("wachtend", "in de wacht", "geblokkeerd", "uitgesteld")),
    ),
    fallback_priority=(
        ("urgent", ("urgent", "kritiek", "hoogste", "spoed", "direct")),
        ("high", ("hoog", "hoge", "belangrijk", "belangrijke")),
        ("normal", ("normaal", "normale", "gemiddeld", "standaard")),
        ("low", ("laag", "lage", "klein", "kleine", "onbelangrijk")),
    ),
)

# ---------------------------------------------------------------------------
# Portuguese
# ---------------------------------------------------------------------------
_PT = LanguageConfig(
    code="pt",
    name="Português",
    due_cues=("vencimento", "prazo", "deve estar pronto até", "até", "para", "limite"),
    scheduled_cues=("programado para", "agendado para", "começar em", "trabalhar em", "em", "no"),
    relative_days={"hoje": 0, "hoje à noite": 0, "amanhã": 1, "depois de amanhã": 2, "ontem": -1},
    now_words=("agora",),
    next_words=("próximo", "próxima"),
    this_words=("este", "esta", "neste", "nesta"),
    in_words=("daqui a", "em"),
    day_units=("dia", "dias"),
    week_units=("semana", "semanas"),
    weekdays={
        "segunda-feira": 0, "segunda": 0, "terça-feira": 1, "terça": 1,
        "quarta-feira": 2, "quarta": 2, "quinta-feira": 3, "quinta": 3,
        "sexta-feira": 4, "sexta": 4, "sábado": 5, "domingo": 6,
    },
    months={
        "janeiro": 1, "jan": 1, "fevereiro": 2, "fev": 2, "março": 3, "abril": 4, "abr": 4,
        "maio": 5, "junho": 6, "jun": 6, "julho": 7, "jul": 7, "agosto": 8, "ago": 8,
        "setembro": 9, "set": 9, "outubro": 10, "out": 10, "novembro": 11, "nov": 11, "dezembro": 12, "dez": 12,
    },
    time_cues=("às", "as"),
    month_joiners=("de",),
    range_starts=("desde", "de"),
    range_joiners=("até", "ao", "a"),
    frequencies={
        "DAILY": ("diário", "diária", "diariamente", "todos os dias", "cada dia", "por dia"),
        "WEEKLY": ("semanal", "semanalmente", "toda semana", "todas as semanas", "por semana"),
        "MONTHLY": ("mensal", "mensalmente", "todo mês", "todos os meses", "por mês"),
        "YEARLY": ("anual", "anualmente", "todo ano", "todos os anos", "por ano"),
    },
    every_words=("todo", "toda", "todos", "todas", "cada"),
    other_words=("outro", "outra", "outros", "outras"),
    plural_weekdays={
        "segundas-feiras": 0, "segundas": 0, "terças-feiras": 1, "terças": 1,
        "quartas-feiras": 2, "quartas": 2, "quintas-feiras": 3, "quintas": 3,
        "sextas-feiras": 4, "sextas": 4, "sábados": 5, "domingos": 6,
    },
    ordinals={
        "primeiro": 1, "primeira": 1,
        "segundo": 2, "segunda": 2,
        "terceiro": 3, "terceira": 3,
        "quarto": 4, "quarta": 4,
        "último": -1, "última": -1,
    },
    periods=_periods(("dia", "dias"), ("semana", "semanas"), ("mês", "meses"), ("ano", "anos")),
    hour_units=("h", "hr", "hora", "horas"),
    minute_units=("m", "min", "minuto", "minutos"),
    fallback_status=(
        ("open", ("a fazer", "pendente", "aberto", "todo", "por fazer")),
        ("in-progress", ("em andamento", "em progresso", "fazendo", "trabalhando", "executando")),
        ("done", ("feito", "concluído", "terminado", "finalizado", "completo")),
        ("cancelled", ("cancelado", "anulado", "suspenso")),
        ("waiting", ("aguardando", "esperando", "bloqueado", "em espera")),
    ),
    fallback_priority=(
        ("urgent", ("urgente", "crítico", "crítica", "máximo", "máxima", "prioritário", "prioritária")),
        ("high", ("alto", "alta", "importante", "elevado", "elevada")),
        ("normal", ("médio", "média", "normal", "regular", "padrão")),
        ("low", ("baixo", "baixa", "menor", "mínimo", "mínima")),
    ),
)

# ---------------------------------------------------------------------------
# Swedish
# ---------------------------------------------------------------------------
_SV = LanguageConfig(
    code="sv",
    name="Svenska",
    due_cues=("förfaller", "deadline", "måste vara klar", "senast", "till", "innan"),
    scheduled_cues=("schemalagd", "planerad för", "börja", "arbeta med", "den", "på"),
    relative_days={
        "idag": 0, "i dag": 0, "ikväll": 0, "i kväll": 0,
        "imorgon": 1, "i morgon": 1,
        "i övermorgon": 2, "övermorgon": 2,
        "igår": -1, "i går": -1,
    },
    now_words=("nu",),
    next_words=("nästa",),
    this_words=("denna", "detta"),
    in_words=("om", "inom"),
    day_units=("dag", "dagar"),
    week_units=("vecka", "veckor"),
    weekdays={
        "måndag": 0, "tisdag": 1, "onsdag": 2, "torsdag": 3,
        "fredag": 4, "lördag": 5, "söndag": 6,
    },
    months={
        "januari": 1, "jan": 1, "februari": 2, "feb": 2, "mars": 3, "april": 4, "apr": 4,
        "maj": 5, "juni": 6, "jun": 6, "juli": 7, "jul": 7, "augusti": 8, "aug": 8, "september": 9,
        "sept": 9, "sep": 9, "oktober": 10, "okt": 10, "november": 11, "nov": 11, "december": 12, "dec": 12,
    },
    time_cues=("klockan", "kl.", "kl"),
    range_starts=("från",),
    range_joiners=("till",),
    frequencies={
        "DAILY": ("dagligen", "varje dag", "alla dagar", "per dag"),
        "WEEKLY": ("veckovis", "varje vecka", "alla veckor", "per vecka"),
        "MONTHLY": ("månadsvis", "varje månad", "alla månader", "per månad"),
        "YEARLY": ("årligen", "varje år", "alla år", "per år"),
    },
    every_words=("varje", "alla", "var"),
    other_words=("annan", "annat", "andra"),
    plural_weekdays={
        "måndagar": 0, "tisdagar": 1, "onsdagar": 2, "torsdagar": 3,
        "fredagar": 4, "lördagar": 5, "söndagar": 6,
    },
    ordinals={"första": 1, "andra": 2, "tredje": 3, "fjärde": 4, "sista": -1},
    periods=_periods(("dag", "dagar"), ("vecka", "veckor"), ("månad", "månader"), ("år",)),
    hour_units=("t", "tim", "timme", "timmar", "h"),
    minute_units=("m", "min", "minut", "minuter"),
    fallback_status=(
        ("open", ("att göra", "öppen", "kvar", "todo")),
        ("in-progress", ("pågående", "arbetar", "i process", "under arbete")),
        ("done", ("klar", "färdig", "slutförd", "avslutad", "gjord")),
        ("cancelled", ("avbruten", "inställd", "avbokad")),
        ("waiting", ("väntar", "väntande", "blockerad", "pausad", "vilande")),
    ),
    fallback_priority=(
        ("urgent", ("brådskande", "kritisk", "högsta", "akut", "omedelbar")),
        ("high", ("hög", "viktig", "förhöjd", "prioriterad")),
        ("normal", ("normal", "medel", "standard", "vanlig")),
        ("low", ("låg", "mindre", "minimal", "obetydlig")),
    ),
)

_REGISTRY: Dict[str, LanguageConfig] = {
    config.code: config for config in (_EN, _DE, _DA, _ES, _FR, _IT, _NL, _PT, _SV)
}


def get_language_config(code: str | None) -> LanguageConfig:
    """Return the tables for ``code`` (``"de"``, ``"de-AT"``, ``"DE"``), falling back to English."""

    normalized = (code or "").strip().lower().replace("_", "-").split("-")[0]
    return _REGISTRY.get(normalized, _REGISTRY[DEFAULT_LOCALE])


__all__ = ["DEFAULT_LOCALE", "WEEKDAY_CODES", "LanguageConfig", "get_language_config"]
