"""
Reference table of known pairwise drug interactions.

Substance names are the canonical (Polish) active-substance names printed on
packages sold in Poland, which is what users type or scan into the active
substance field. Rows are matched in this order.
"""

from medminder.domain.entities.drug_interaction import DrugInteraction, InteractionSeverity

DRUG_INTERACTIONS: tuple[DrugInteraction, ...] = (
    # Anticoagulants
    DrugInteraction(
        id="1",
        substance1="warfaryna",
        substance2="kwas acetylosalicylowy",
        severity=InteractionSeverity.HIGH,
        description="Zwiększone ryzyko krwawienia przy jednoczesnym stosowaniu warfaryny i aspiryny.",
        recommendation="Unikać jednoczesnego stosowania bez wyraźnego zalecenia lekarza. Konieczna częstsza kontrola INR.",
    ),
    DrugInteraction(
        id="2",
        substance1="warfaryna",
        substance2="ibuprofen",
        severity=InteractionSeverity.HIGH,
        description="NLPZ mogą nasilać działanie warfaryny i zwiększać ryzyko krwawienia.",
        recommendation="Jeśli konieczne, stosować paracetamol zamiast ibuprofenu.",
    ),
    DrugInteraction(
        id="3",
        substance1="warfaryna",
        substance2="paracetamol",
        severity=InteractionSeverity.MEDIUM,
        description="Regularne stosowanie paracetamolu może nieznacznie nasilić działanie warfaryny.",
        recommendation="Można stosować, ale zalecana kontrola INR przy regularnym przyjmowaniu.",
    ),
    # Metformin
    DrugInteraction(
        id="4",
        substance1="metformina",
        substance2="alkohol",
        severity=InteractionSeverity.CRITICAL,
        description="Alkohol znacznie zwiększa ryzyko kwasicy mleczanowej przy stosowaniu metforminy.",
        recommendation="Bezwzględnie unikać spożywania alkoholu podczas leczenia metforminą.",
    ),
    DrugInteraction(
        id="5",
        substance1="metformina",
        substance2="środki kontrastowe",
        severity=InteractionSeverity.HIGH,
        description="Jodowe środki kontrastowe mogą powodować ostrą niewydolność nerek i kwasicę mleczanową.",
        recommendation="Odstawić metforminę 48h przed badaniem z kontrastem i 48h po badaniu.",
    ),
    # NSAIDs
    DrugInteraction(
        id="6",
        substance1="ibuprofen",
        substance2="kwas acetylosalicylowy",
        severity=InteractionSeverity.MEDIUM,
        description="Ibuprofen może osłabiać działanie kardioprotekcyjne aspiryny.",
        recommendation="Przyjmować aspirynę co najmniej 30 minut przed ibuprofenem lub 8 godzin po.",
    ),
    DrugInteraction(
        id="7",
        substance1="ibuprofen",
        substance2="diklofenak",
        severity=InteractionSeverity.HIGH,
        description="Łączenie dwóch NLPZ znacznie zwiększa ryzyko uszkodzenia żołądka i nerek.",
        recommendation="Nie łączyć dwóch leków z grupy NLPZ.",
    ),
    # ACE inhibitors
    DrugInteraction(
        id="8",
        substance1="lizynopryl",
        substance2="potas",
        severity=InteractionSeverity.HIGH,
        description="Inhibitory ACE mogą zwiększać poziom potasu we krwi, łączenie z suplementami potasu grozi hiperkaliemią.",
        recommendation="Unikać suplementów potasu bez kontroli laboratoryjnej.",
    ),
    DrugInteraction(
        id="9",
        substance1="lizynopryl",
        substance2="ibuprofen",
        severity=InteractionSeverity.MEDIUM,
        description="NLPZ mogą osłabiać działanie hipotensyjne inhibitorów ACE.",
        recommendation="Monitorować ciśnienie krwi, rozważyć paracetamol jako alternatywę.",
    ),
    # Statins
    DrugInteraction(
        id="10",
        substance1="atorwastatyna",
        substance2="grejpfrut",
        severity=InteractionSeverity.MEDIUM,
        description="Sok grejpfrutowy zwiększa stężenie statyn we krwi, nasilając ryzyko działań niepożądanych.",
        recommendation="Unikać spożywania grejpfrutów podczas leczenia atorwastatyną.",
    ),
    DrugInteraction(
        id="11",
        substance1="simwastatyna",
        substance2="amiodaron",
        severity=InteractionSeverity.HIGH,
        description="Amiodaron znacznie zwiększa stężenie simwastatyny, ryzyko rabdomiolizy.",
        recommendation="Maksymalna dawka simwastatyny to 20mg przy jednoczesnym stosowaniu amiodaronu.",
    ),
    # Benzodiazepines
    DrugInteraction(
        id="12",
        substance1="alprazolam",
        substance2="alkohol",
        severity=InteractionSeverity.CRITICAL,
        description="Łączenie benzodiazepin z alkoholem może prowadzić do ciężkiej depresji oddechowej.",
        recommendation="Bezwzględnie unikać alkoholu podczas stosowania alprazolamu.",
    ),
    DrugInteraction(
        id="13",
        substance1="alprazolam",
        substance2="tramadol",
        severity=InteractionSeverity.CRITICAL,
        description="Łączenie benzodiazepin z opioidami znacznie zwiększa ryzyko depresji oddechowej.",
        recommendation="Unikać jednoczesnego stosowania, jeśli konieczne - pod ścisłą kontrolą lekarza.",
    ),
    # Antidiabetics
    DrugInteraction(
        id="14",
        substance1="gliklazyd",
        substance2="flukonazol",
        severity=InteractionSeverity.HIGH,
        description="Flukonazol hamuje metabolizm pochodnych sulfonylomocznika, ryzyko hipoglikemii.",
        recommendation="Częstsza kontrola glikemii, możliwa konieczność zmniejszenia dawki gliklazydu.",
    ),
    # Antihypertensives
    DrugInteraction(
        id="15",
        substance1="amlodypina",
        substance2="simwastatyna",
        severity=InteractionSeverity.MEDIUM,
        description="Amlodypina może zwiększać stężenie simwastatyny we krwi.",
        recommendation="Maksymalna dawka simwastatyny to 20mg przy jednoczesnym stosowaniu amlodypiny.",
    ),
)
