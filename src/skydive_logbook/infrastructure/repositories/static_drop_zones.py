"""Static directory of French drop zones."""

from typing import Dict, List, Optional

from skydive_logbook.application.ports.repositories import DropZoneDirectory
from skydive_logbook.domain.entities.drop_zone import DropZone, DropZoneStatus


# id, name, city, region, latitude, longitude, phone, website, aircraft, max altitude (m), status
DROP_ZONES = [
    DropZone("1", "Centre de Parachutisme de Bourg-en-Bresse", "Bourg-en-Bresse", "Auvergne-Rhône-Alpes", 46.2189, 5.2305, "04 74 25 71 84", "parachutisme-bourg.com", ("Cessna 182", "Cessna 206"), 4000, DropZoneStatus.OPEN),
    DropZone("2", "Aéroclub de Tallard", "Tallard", "Provence-Alpes-Côte d'Azur", 44.4667, 6.0333, "04 92 54 10 84", "tallard.com", ("Pilatus Porter", "Twin Otter"), 4200, DropZoneStatus.OPEN),
    DropZone("3", "Parachutisme Grenoble", "Grenoble", "Auvergne-Rhône-Alpes", 45.1885, 5.7245, "04 76 54 62 85", "parachutisme-grenoble.fr", ("Cessna 182", "Caravan"), 4000, DropZoneStatus.OPEN),
    DropZone("4", "Voltige Aérienne du Forez", "Saint-Étienne", "Auvergne-Rhône-Alpes", 45.4397, 4.3839, "04 77 36 85 47", "voltige-forez.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("5", "Parachutisme Annecy", "Annecy", "Auvergne-Rhône-Alpes", 45.8992, 6.1294, "04 50 45 71 23", "parachutisme-annecy.fr", ("Cessna 182", "Islander"), 4200, DropZoneStatus.OPEN),
    DropZone("6", "Centre de Pau", "Pau", "Nouvelle-Aquitaine", 43.38, -0.42, "05 59 33 85 59", "parachutisme-pau.com", ("Cessna 182", "PAC 750"), 4000, DropZoneStatus.LIMITED),
    DropZone("7", "Parachutisme Bordeaux", "Bordeaux", "Nouvelle-Aquitaine", 44.8378, -0.5792, "05 56 87 45 23", "parachutisme-bordeaux.fr", ("Cessna 206", "Caravan"), 4000, DropZoneStatus.OPEN),
    DropZone("8", "Aéroclub de Limoges", "Limoges", "Nouvelle-Aquitaine", 45.8354, 1.2644, "05 55 06 78 32", "aeroclub-limoges.fr", ("Cessna 182",), 3500, DropZoneStatus.OPEN),
    DropZone("9", "Parachutisme La Rochelle", "La Rochelle", "Nouvelle-Aquitaine", 46.1603, -1.1511, "05 46 41 85 96", "parachutisme-larochelle.com", ("Cessna 182", "Islander"), 4000, DropZoneStatus.OPEN),
    DropZone("10", "Biscarrosse Parachutisme", "Biscarrosse", "Nouvelle-Aquitaine", 44.4283, -1.2511, "05 58 78 45 71", "biscarrosse-parachutisme.fr", ("Twin Otter", "Caravan"), 4500, DropZoneStatus.OPEN),
    DropZone("11", "Parachutisme Cahors", "Cahors", "Occitanie", 44.35, 1.475, "05 65 22 97 21", "parachutisme-cahors.com", ("Cessna 206", "Islander"), 3500, DropZoneStatus.CLOSED),
    DropZone("12", "Centre de Toulouse", "Toulouse", "Occitanie", 43.6047, 1.4442, "05 61 85 47 23", "parachutisme-toulouse.fr", ("Cessna 182", "Caravan"), 4200, DropZoneStatus.OPEN),
    DropZone("13", "Parachutisme Montpellier", "Montpellier", "Occitanie", 43.6108, 3.8767, "04 67 78 45 62", "parachutisme-montpellier.fr", ("Cessna 206", "Twin Otter"), 4000, DropZoneStatus.OPEN),
    DropZone("14", "Aéroclub de Perpignan", "Perpignan", "Occitanie", 42.6886, 2.8948, "04 68 52 71 84", "aeroclub-perpignan.com", ("Cessna 182",), 3800, DropZoneStatus.OPEN),
    DropZone("15", "Parachutisme Albi", "Albi", "Occitanie", 43.9289, 2.1479, "05 63 54 87 41", "parachutisme-albi.fr", ("Cessna 206",), 3500, DropZoneStatus.LIMITED),
    DropZone("16", "Saumur Parachutisme", "Saumur", "Pays de la Loire", 47.26, -0.11, "02 41 50 80 60", "saumur-parachutisme.com", ("Cessna 182", "Caravan"), 4000, DropZoneStatus.OPEN),
    DropZone("17", "Parachutisme Nantes", "Nantes", "Pays de la Loire", 47.2184, -1.5536, "02 40 78 45 23", "parachutisme-nantes.fr", ("Cessna 206", "Islander"), 4000, DropZoneStatus.OPEN),
    DropZone("18", "Le Mans Parachutisme", "Le Mans", "Pays de la Loire", 48.0061, 0.1996, "02 43 85 47 96", "lemans-parachutisme.com", ("Cessna 182",), 3800, DropZoneStatus.OPEN),
    DropZone("19", "Cholet Parachutisme", "Cholet", "Pays de la Loire", 47.0858, -0.8789, "02 41 62 85 74", "cholet-parachutisme.fr", ("Cessna 206",), 3500, DropZoneStatus.OPEN),
    DropZone("20", "Parachutisme Vannes", "Vannes", "Bretagne", 47.6587, -2.7606, "02 97 47 85 62", "parachutisme-vannes.fr", ("Cessna 182", "Islander"), 4000, DropZoneStatus.OPEN),
    DropZone("21", "Aéroclub de Rennes", "Rennes", "Bretagne", 48.1173, -1.6778, "02 99 54 78 41", "aeroclub-rennes.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("22", "Brest Parachutisme", "Brest", "Bretagne", 48.3905, -4.4861, "02 98 47 85 23", "brest-parachutisme.fr", ("Cessna 182",), 3500, DropZoneStatus.LIMITED),
    DropZone("23", "Quimper Parachutisme", "Quimper", "Bretagne", 47.9978, -4.0972, "02 98 74 85 96", "quimper-parachutisme.com", ("Cessna 206",), 3600, DropZoneStatus.OPEN),
    DropZone("24", "Caen Parachutisme", "Caen", "Normandie", 49.1829, -0.3707, "02 31 85 47 23", "caen-parachutisme.fr", ("Cessna 182", "Caravan"), 4000, DropZoneStatus.OPEN),
    DropZone("25", "Rouen Parachutisme", "Rouen", "Normandie", 49.4431, 1.0993, "02 35 78 45 62", "rouen-parachutisme.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("26", "Cherbourg Parachutisme", "Cherbourg", "Normandie", 49.6337, -1.6815, "02 33 52 71 84", "cherbourg-parachutisme.fr", ("Cessna 182",), 3500, DropZoneStatus.LIMITED),
    DropZone("27", "Lille Parachutisme", "Lille", "Hauts-de-France", 50.6292, 3.0573, "03 20 54 78 41", "lille-parachutisme.fr", ("Cessna 182", "Islander"), 4000, DropZoneStatus.OPEN),
    DropZone("28", "Amiens Parachutisme", "Amiens", "Hauts-de-France", 49.8951, 2.2956, "03 22 85 47 96", "amiens-parachutisme.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("29", "Calais Parachutisme", "Calais", "Hauts-de-France", 50.9581, 1.9543, "03 21 47 85 23", "calais-parachutisme.fr", ("Cessna 182",), 3600, DropZoneStatus.OPEN),
    DropZone("30", "Strasbourg Parachutisme", "Strasbourg", "Grand Est", 48.5734, 7.7521, "03 88 54 78 41", "strasbourg-parachutisme.fr", ("Cessna 182", "Caravan"), 4200, DropZoneStatus.OPEN),
    DropZone("31", "Mulhouse Parachutisme", "Mulhouse", "Grand Est", 47.7508, 7.3359, "03 89 85 47 62", "mulhouse-parachutisme.com", ("Cessna 206",), 4000, DropZoneStatus.OPEN),
    DropZone("32", "Metz Parachutisme", "Metz", "Grand Est", 49.1193, 6.1757, "03 87 78 45 23", "metz-parachutisme.fr", ("Cessna 182",), 3800, DropZoneStatus.LIMITED),
    DropZone("33", "Reims Parachutisme", "Reims", "Grand Est", 49.2583, 4.0317, "03 26 52 71 84", "reims-parachutisme.com", ("Cessna 206", "Islander"), 4000, DropZoneStatus.OPEN),
    DropZone("34", "Orléans Parachutisme", "Orléans", "Centre-Val de Loire", 47.9029, 1.9093, "02 38 85 47 23", "orleans-parachutisme.fr", ("Cessna 182", "Caravan"), 4000, DropZoneStatus.OPEN),
    DropZone("35", "Tours Parachutisme", "Tours", "Centre-Val de Loire", 47.3941, 0.6848, "02 47 54 78 41", "tours-parachutisme.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("36", "Châteauroux Parachutisme", "Châteauroux", "Centre-Val de Loire", 46.8119, 1.6928, "02 54 78 45 96", "chateauroux-parachutisme.fr", ("Cessna 182",), 3500, DropZoneStatus.OPEN),
    DropZone("37", "Parachutisme de Paris", "Meaux", "Île-de-France", 48.9553, 2.8736, "01 64 33 85 47", "parachutisme-paris.fr", ("Cessna 182", "Twin Otter"), 4000, DropZoneStatus.OPEN),
    DropZone("38", "Aérodrome de Lognes", "Lognes", "Île-de-France", 48.8335, 2.6319, "01 60 05 47 23", "lognes-parachutisme.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("39", "Coulommiers Parachutisme", "Coulommiers", "Île-de-France", 48.8378, 3.0833, "01 64 65 78 41", "coulommiers-parachutisme.fr", ("Cessna 182",), 3600, DropZoneStatus.LIMITED),
    DropZone("40", "Dijon Parachutisme", "Dijon", "Bourgogne-Franche-Comté", 47.3220, 5.0415, "03 80 54 78 41", "dijon-parachutisme.fr", ("Cessna 182", "Caravan"), 4000, DropZoneStatus.OPEN),
    DropZone("41", "Besançon Parachutisme", "Besançon", "Bourgogne-Franche-Comté", 47.2378, 6.0241, "03 81 85 47 23", "besancon-parachutisme.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("42", "Marseille Parachutisme", "Marseille", "Provence-Alpes-Côte d'Azur", 43.2965, 5.3698, "04 91 78 45 62", "marseille-parachutisme.fr", ("Cessna 182", "Twin Otter"), 4200, DropZoneStatus.OPEN),
    DropZone("43", "Nice Parachutisme", "Nice", "Provence-Alpes-Côte d'Azur", 43.7102, 7.2620, "04 93 52 71 84", "nice-parachutisme.com", ("Cessna 206", "Islander"), 4000, DropZoneStatus.OPEN),
    DropZone("44", "Toulon Parachutisme", "Toulon", "Provence-Alpes-Côte d'Azur", 43.1242, 5.928, "04 94 47 85 23", "toulon-parachutisme.fr", ("Cessna 182",), 3800, DropZoneStatus.LIMITED),
    DropZone("45", "Avignon Parachutisme", "Avignon", "Provence-Alpes-Côte d'Azur", 43.9493, 4.8059, "04 90 74 85 96", "avignon-parachutisme.com", ("Cessna 206",), 3600, DropZoneStatus.OPEN),
    DropZone("46", "Ajaccio Parachutisme", "Ajaccio", "Corse", 41.9176, 8.7367, "04 95 25 47 81", "ajaccio-parachutisme.fr", ("Cessna 182",), 4000, DropZoneStatus.OPEN),
    DropZone("47", "Bastia Parachutisme", "Bastia", "Corse", 42.7028, 9.4517, "04 95 54 78 62", "bastia-parachutisme.com", ("Cessna 206",), 3800, DropZoneStatus.OPEN),
    DropZone("48", "Martinique Parachutisme", "Fort-de-France", "Martinique", 14.6037, -61.0662, "05 96 71 85 47", "martinique-parachutisme.fr", ("Cessna 182",), 3500, DropZoneStatus.OPEN),
    DropZone("49", "Guadeloupe Parachutisme", "Pointe-à-Pitre", "Guadeloupe", 16.2650, -61.5510, "05 90 85 47 23", "guadeloupe-parachutisme.fr", ("Cessna 206",), 3600, DropZoneStatus.OPEN),
    DropZone("50", "Réunion Parachutisme", "Saint-Denis", "La Réunion", -20.8824, 55.4504, "02 62 54 78 41", "reunion-parachutisme.fr", ("Cessna 182",), 4000, DropZoneStatus.OPEN),
]


class StaticDropZoneDirectory(DropZoneDirectory):
    """Read-only drop zone directory backed by DROP_ZONES."""

    def __init__(self, drop_zones: Optional[List[DropZone]] = None):
        self._drop_zones = list(DROP_ZONES if drop_zones is None else drop_zones)
        self._by_id: Dict[str, DropZone] = {drop_zone.id: drop_zone for drop_zone in self._drop_zones}

    def find_all(self) -> List[DropZone]:
        """All drop zones in catalogue order."""
        return list(self._drop_zones)

    def find_by_id(self, dropzone_id: str) -> Optional[DropZone]:
        """Find a drop zone by id."""
        return self._by_id.get(dropzone_id)
