from src.models.country import CountryProfile, build_sector_index
from src.reference.naming import NAMING_RULES

# Rwanda bounding box (min_lon, min_lat, max_lon, max_lat)
RWANDA_BOUNDS = "28.86, -2.84, 30.90, -1.05"

# All 30 districts of Rwanda
RWANDA_DISTRICTS = frozenset([
    "kicukiro", "gasabo", "nyarugenge",
    "bugesera", "gatsibo", "kayonza", "kirehe", "ngoma", "nyagatare", "rwamagana",
    "burera", "gakenke", "gicumbi", "musanze", "rulindo",
    "gisagara", "huye", "kamonyi", "muhanga", "nyamagabe", "nyanza", "nyaruguru", "ruhango",
    "karongi", "ngororero", "nyabihu", "nyamasheke", "rubavu", "rusizi", "rutsiro",
])

DISTRICT_TO_PROVINCE = {
    "kicukiro": "Kigali City", "gasabo": "Kigali City", "nyarugenge": "Kigali City",
    "bugesera": "Eastern Province", "gatsibo": "Eastern Province", "kayonza": "Eastern Province",
    "kirehe": "Eastern Province", "ngoma": "Eastern Province", "nyagatare": "Eastern Province",
    "rwamagana": "Eastern Province",
    "burera": "Northern Province", "gakenke": "Northern Province", "gicumbi": "Northern Province",
    "musanze": "Northern Province", "rulindo": "Northern Province",
    "gisagara": "Southern Province", "huye": "Southern Province", "kamonyi": "Southern Province",
    "muhanga": "Southern Province", "nyamagabe": "Southern Province", "nyanza": "Southern Province",
    "nyaruguru": "Southern Province", "ruhango": "Southern Province",
    "karongi": "Western Province", "ngororero": "Western Province", "nyabihu": "Western Province",
    "nyamasheke": "Western Province", "rubavu": "Western Province", "rusizi": "Western Province",
    "rutsiro": "Western Province",
}

# Sectors of each district, keyed by lower-cased district name
RWANDA_SECTORS = {
    # Kigali City
    "gasabo": [
        "Bumbogo", "Gatsata", "Gikomero", "Gisozi", "Jabana", "Jali",
        "Kacyiru", "Kimihurura", "Kimironko", "Kinyinya", "Ndera",
        "Nduba", "Remera", "Rusororo", "Rutunga",
    ],
    "kicukiro": [
        "Gahanga", "Gatenga", "Gikondo", "Kagarama", "Kanombe", "Kicukiro",
        "Kigarama", "Masaka", "Niboye", "Nyarugunga",
    ],
    "nyarugenge": [
        "Gitega", "Kanyinya", "Kigali", "Kimisagara", "Mageragere",
        "Muhima", "Nyakabanda", "Nyamirambo", "Nyarugenge", "Rwezamenyo",
    ],

    # Eastern Province
    "bugesera": [
        "Gashora", "Juru", "Kamabuye", "Mareba", "Mayange", "Musenyi",
        "Mwogo", "Ngeruka", "Ntarama", "Nyamata", "Nyarugenge", "Rilima",
        "Ruhuha", "Rweru", "Shyara",
    ],
    "gatsibo": [
        "Gasange", "Gatsibo", "Gitoki", "Kabarore", "Kageyo", "Kiramuruzi",
        "Kiziguro", "Muhura", "Murambi", "Ngarama", "Nyagihanga", "Remera",
        "Rugarama", "Rwimbogo",
    ],
    "kayonza": [
        "Gahini", "Kabare", "Kabarondo", "Mukarange", "Murama", "Murundi",
        "Mwiri", "Ndego", "Nyamirama", "Rukara", "Ruramira", "Rwinkwavu",
    ],
    "kirehe": [
        "Gahara", "Gatore", "Kigarama", "Kigina", "Kirehe", "Mahama",
        "Mpanga", "Musaza", "Mushikiri", "Nasho", "Nyamugari", "Nyarubuye",
    ],
    "ngoma": [
        "Gashanda", "Jarama", "Karembo", "Kibungo", "Mugesera", "Murama",
        "Mutenderi", "Remera", "Rukira", "Rukumberi", "Sake", "Zaza",
    ],
    "nyagatare": [
        "Gatunda", "Karama", "Karangazi", "Katabagemu", "Kiyombe", "Matimba",
        "Mimuli", "Musheli", "Nyagatare", "Rukomo", "Rwempasha", "Rwimiyaga",
        "Tabagwe", "Mukama",
    ],
    "rwamagana": [
        "Fumbwe", "Gahengeri", "Gishari", "Karenge", "Kigabiro", "Muhazi",
        "Munyaga", "Munyiginya", "Musha", "Muyumbu", "Mwulire", "Nyakaliro",
        "Nzige", "Rubona", "Rwamagana",
    ],

    # Northern Province
    "burera": [
        "Bungwe", "Butaro", "Cyeru", "Cyanika", "Gahunga", "Gatebe",
        "Gitovu", "Kinyababa", "Kivuye", "Nemba", "Rugarama", "Rugendabari",
        "Ruhunde", "Rusarabuye", "Rwerere",
    ],
    "gakenke": [
        "Busengo", "Coko", "Cyabingo", "Gakenke", "Gashenyi", "Janja",
        "Kamubuga", "Karambo", "Kivuruga", "Mataba", "Minazi", "Muhondo",
        "Muyongwe", "Muzo", "Nemba", "Ruli", "Rusasa", "Rushashi",
    ],
    "gicumbi": [
        "Bukure", "Bwisige", "Byumba", "Cyumba", "Giti", "Kaniga",
        "Manyagiro", "Miyove", "Muko", "Mutete", "Nyamiyaga", "Nyankenke",
        "Rubaya", "Rukomo", "Rushaki", "Rutare", "Ruvune", "Shangasha",
        "Rwamiko",
    ],
    "musanze": [
        "Busogo", "Cyuve", "Gacaca", "Gashaki", "Gataraga", "Kimonyi",
        "Kinigi", "Muhoza", "Muko", "Musanze", "Nkotsi", "Nyange",
        "Remera", "Rwaza", "Shingiro",
    ],
    "rulindo": [
        "Base", "Burega", "Bushoki", "Buyoga", "Cyinzuzi", "Cyungo",
        "Kinihira", "Kisaro", "Masoro", "Mbogo", "Murambi", "Ntarabana",
        "Rusiga", "Shyorongi", "Tumba",
    ],

    # Southern Province
    "gisagara": [
        "Gikonko", "Gishubi", "Kansi", "Kibilizi", "Kigembe", "Muganza",
        "Mukindo", "Musha", "Ndora", "Nyanza", "Save", "Simbi",
    ],
    "huye": [
        "Gishamvu", "Huye", "Karama", "Kigoma", "Kinazi", "Maraba",
        "Mbazi", "Mukura", "Ngoma", "Ruhashya", "Rusatira", "Rwaniro",
        "Simbi", "Tumba",
    ],
    "kamonyi": [
        "Gacurabwenge", "Karama", "Kayenzi", "Kayumbu", "Mugina", "Musambira",
        "Ngamba", "Nyamiyaga", "Nyarubaka", "Rugalika", "Rukoma", "Runda",
    ],
    "muhanga": [
        "Cyeza", "Kabacuzi", "Kibangu", "Kiyumba", "Muhanga", "Mushishiro",
        "Nyabinoni", "Nyamabuye", "Nyarusange", "Rongi", "Rugendabari", "Shyogwe",
    ],
    "nyamagabe": [
        "Buruhukiro", "Cyanika", "Gasaka", "Gatare", "Kaduha", "Kamegeri",
        "Kibirizi", "Kibumbwe", "Kitabi", "Mbazi", "Mugano", "Musange",
        "Musebeya", "Nkomane", "Tare", "Uwinkingi",
    ],
    "nyanza": [
        "Busasamana", "Busoro", "Cyabakamyi", "Kibilizi", "Kigoma", "Mukingo",
        "Muyira", "Ntyazo", "Nyagisozi", "Rwabicuma",
    ],
    "nyaruguru": [
        "Busanze", "Cyahinda", "Kibeho", "Kivu", "Mata", "Muganza",
        "Munini", "Ngera", "Ngoma", "Nyabimata", "Nyagisozi", "Ruheru",
        "Ruramba", "Rusenge",
    ],
    "ruhango": [
        "Byimana", "Kinihira", "Kinazi", "Mbuye", "Mwendo", "Ntongwe",
        "Ruhango",
    ],

    # Western Province
    "karongi": [
        "Bwishyura", "Gashari", "Gishyita", "Gitesi", "Mubuga", "Murambi",
        "Murundi", "Mutuntu", "Rubengera", "Rugabano", "Ruganda", "Rwankuba",
        "Twumba",
    ],
    "ngororero": [
        "Bwira", "Gatumba", "Hindiro", "Kabaya", "Kageyo", "Kavumu",
        "Matyazo", "Muhanda", "Muhororo", "Ndaro", "Ngororero", "Nyange",
        "Sovu",
    ],
    "nyabihu": [
        "Bigogwe", "Jenda", "Jomba", "Kabatwa", "Karago", "Kintobo",
        "Mukamira", "Muringa", "Rambura", "Rugera", "Rurembo", "Shyira",
    ],
    "nyamasheke": [
        "Bushekeri", "Bushenge", "Cyato", "Gihombo", "Kagano", "Karambi",
        "Kanjongo", "Karengera", "Kirimbi", "Macuba", "Mahembe", "Nyabitekeri",
        "Rangiro", "Ruharambuga", "Shangi",
    ],
    "rubavu": [
        "Bugeshi", "Busasamana", "Cyanzarwe", "Gisenyi", "Kanama", "Mudende",
        "Nyakiriba", "Nyamyumba", "Nyundo", "Rubavu", "Rugerero", "Rwerere",
    ],
    "rusizi": [
        "Bugarama", "Butare", "Bweyeye", "Gikundamvura", "Gashonga", "Giheke",
        "Gihundwe", "Gitambi", "Kamembe", "Muganza", "Mururu", "Nkanka",
        "Nkombo", "Nkungu", "Nyakabuye", "Nyakarenzo", "Nzahaha", "Rwimbogo",
    ],
    "rutsiro": [
        "Boneza", "Gihango", "Kigeyo", "Kivumu", "Manihira", "Mukura",
        "Murunda", "Musasa", "Mushonyi", "Ruhango",
    ],
}

RWANDA = CountryProfile(
    code="rw",
    name="Rwanda",
    bbox=RWANDA_BOUNDS,
    districts=RWANDA_DISTRICTS,
    district_to_province=DISTRICT_TO_PROVINCE,
    sectors_by_district=build_sector_index(RWANDA_SECTORS),
    naming=NAMING_RULES["rw"],
)


def sectors_by_district(district_name, profile=RWANDA):
    """Return the sectors of a district, alphabetically sorted (case-insensitive lookup)."""
    return sorted(profile.sectors_for(district_name))


def districts_with_sectors(profile=RWANDA):
    return [district.capitalize() for district in profile.sectors_by_district]


def is_valid_sector_for_district(sector, district, profile=RWANDA):
    wanted = sector.strip().lower()
    return any(s.lower() == wanted for s in profile.sectors_for(district))


def total_sector_count(profile=RWANDA):
    return sum(len(sectors) for sectors in profile.sectors_by_district.values())
