# muslimdaily/services/helpers/constants.py

from ...models import JakimZone

# Maps the e-solat response keys to our standardized timing keys.
ESOLAT_TIMING_KEYS = {
    "imsak": "Imsak",
    "fajr": "Fajr",
    "syuruk": "Sunrise",
    "dhuhr": "Dhuhr",
    "asr": "Asr",
    "maghrib": "Maghrib",
    "isha": "Isha",
}

PRAYER_TYPES = ("fajr", "dhuhr", "asr", "maghrib", "isha")

# Absolute fallback used when the prayer time source is unavailable.
DEFAULT_SCHEDULE_TIMES = {
    "fajr": "5:45 AM",
    "sunrise": "7:05 AM",
    "dhuhr": "1:01 PM",
    "asr": "4:15 PM",
    "maghrib": "7:15 PM",
    "isha": "8:30 PM",
}

# Served by the legacy /api/prayer-times endpoint.
SAMPLE_SCHEDULE_TIMES = {
    "fajr": "5:45 AM",
    "dhuhr": "1:15 PM",
    "asr": "4:30 PM",
    "maghrib": "7:05 PM",
    "isha": "8:20 PM",
}

# Complete JAKIM zone table for Malaysia. Order matters: bounding-box matches
# and nearest-zone ties are both resolved in this order.
JAKIM_ZONES = (
    # Johor
    JakimZone('JHR01', 'Johor', 'Pulau Aur dan Pulau Pemanggil', 2.0, 2.8, 103.8, 104.5),
    JakimZone('JHR02', 'Johor', 'Johor Bahru, Kota Tinggi, Mersing, Kulai', 1.4, 2.0, 103.5, 104.2),
    JakimZone('JHR03', 'Johor', 'Kluang, Pontian', 1.8, 2.3, 102.8, 103.5),
    JakimZone('JHR04', 'Johor', 'Batu Pahat, Muar, Segamat, Gemas Johor, Tangkak', 1.8, 2.5, 102.5, 103.2),

    # Kedah
    JakimZone('KDH01', 'Kedah', 'Kota Setar, Kubang Pasu, Pokok Sena', 5.8, 6.5, 100.1, 100.6),
    JakimZone('KDH02', 'Kedah', 'Kuala Muda, Yan, Pendang', 5.6, 6.0, 100.3, 100.8),
    JakimZone('KDH03', 'Kedah', 'Padang Terap, Sik', 6.0, 6.5, 100.6, 101.0),
    JakimZone('KDH04', 'Kedah', 'Baling', 5.6, 6.0, 100.8, 101.2),
    JakimZone('KDH05', 'Kedah', 'Bandar Baharu, Kulim', 5.3, 5.7, 100.5, 100.9),
    JakimZone('KDH06', 'Kedah', 'Langkawi', 6.2, 6.5, 99.7, 100.0),
    JakimZone('KDH07', 'Kedah', 'Puncak Gunung Jerai', 5.8, 6.0, 100.6, 100.8),

    # Kelantan
    JakimZone('KTN01', 'Kelantan', 'Bachok, Kota Bharu, Machang, Pasir Mas, Pasir Puteh, Tanah Merah, Tumpat, Kuala Krai, Mukim Chiku', 5.5, 6.2, 101.8, 102.5),
    JakimZone('KTN02', 'Kelantan', 'Gua Musang, Jeli, Jajahan Kecil Lojing', 4.5, 5.5, 101.5, 102.5),

    # Melaka
    JakimZone('MLK01', 'Melaka', 'Seluruh Negeri Melaka', 2.1, 2.5, 102.1, 102.4),

    # Negeri Sembilan
    JakimZone('NGS01', 'Negeri Sembilan', 'Tampin, Jempol', 2.4, 2.8, 102.1, 102.5),
    JakimZone('NGS02', 'Negeri Sembilan', 'Jelebu, Kuala Pilah, Rembau', 2.6, 3.1, 101.9, 102.3),
    JakimZone('NGS03', 'Negeri Sembilan', 'Port Dickson, Seremban', 2.4, 2.8, 101.7, 102.1),

    # Pahang
    JakimZone('PHG01', 'Pahang', 'Pulau Tioman', 2.7, 2.9, 104.1, 104.3),
    JakimZone('PHG02', 'Pahang', 'Kuantan, Pekan, Muadzam Shah', 3.4, 4.0, 102.9, 103.6),
    JakimZone('PHG03', 'Pahang', 'Jerantut, Temerloh, Maran, Bera, Chenor, Jengka', 3.2, 4.0, 102.0, 103.0),
    JakimZone('PHG04', 'Pahang', 'Bentong, Lipis, Raub', 3.3, 4.0, 101.5, 102.3),
    JakimZone('PHG05', 'Pahang', 'Genting Sempah, Janda Baik, Bukit Tinggi', 3.2, 3.4, 101.7, 101.9),
    JakimZone('PHG06', 'Pahang', 'Cameron Highlands, Genting Highlands, Bukit Fraser', 4.3, 4.7, 101.3, 101.5),
    JakimZone('PHG07', 'Pahang', 'Zon Khas Daerah Rompin', 2.5, 3.2, 103.0, 103.8),

    # Perlis
    JakimZone('PLS01', 'Perlis', 'Kangar, Padang Besar, Arau', 6.3, 6.7, 100.1, 100.4),

    # Pulau Pinang
    JakimZone('PNG01', 'Pulau Pinang', 'Seluruh Negeri Pulau Pinang', 5.1, 5.5, 100.2, 100.5),

    # Perak
    JakimZone('PRK01', 'Perak', 'Tapah, Slim River, Tanjung Malim', 3.8, 4.3, 101.0, 101.5),
    JakimZone('PRK02', 'Perak', 'Kuala Kangsar, Sg. Siput, Ipoh, Batu Gajah, Kampar', 4.3, 5.0, 100.8, 101.3),
    JakimZone('PRK03', 'Perak', 'Lenggong, Pengkalan Hulu, Grik', 5.0, 5.8, 100.8, 101.3),
    JakimZone('PRK04', 'Perak', 'Temengor, Belum', 5.3, 5.8, 101.1, 101.5),
    JakimZone('PRK05', 'Perak', 'Kg Gajah, Teluk Intan, Bagan Datuk, Seri Iskandar, Beruas, Parit, Lumut, Sitiawan, Pulau Pangkor', 3.8, 4.5, 100.6, 101.1),
    JakimZone('PRK06', 'Perak', 'Selama, Taiping, Bagan Serai, Parit Buntar', 4.7, 5.2, 100.5, 100.9),
    JakimZone('PRK07', 'Perak', 'Bukit Larut', 4.8, 5.0, 100.8, 101.0),

    # Sabah
    JakimZone('SBH01', 'Sabah', 'Sandakan, Bukit Garam, Semawang, Temanggong, Tambisan', 5.5, 6.5, 117.5, 119.0),
    JakimZone('SBH02', 'Sabah', 'Beluran, Telupid, Pinangah, Terusan, Kuamut', 5.0, 6.0, 116.5, 118.0),
    JakimZone('SBH03', 'Sabah', 'Lahad Datu, Silabukan, Kunak, Sahabat, Semporna, Tungku', 4.0, 5.5, 117.5, 119.0),
    JakimZone('SBH04', 'Sabah', 'Tawau, Balong, Merotai, Kalabakan', 4.0, 5.0, 117.0, 118.5),
    JakimZone('SBH05', 'Sabah', 'Kudat, Kota Marudu, Pitas, Pulau Banggi', 6.5, 7.5, 116.5, 117.5),
    JakimZone('SBH06', 'Sabah', 'Gunung Kinabalu', 5.8, 6.5, 116.0, 116.8),
    JakimZone('SBH07', 'Sabah', 'Kota Kinabalu, Ranau, Kota Belud, Tuaran, Penampang, Papar, Putatan', 5.5, 6.5, 115.5, 116.5),
    JakimZone('SBH08', 'Sabah', 'Pensiangan, Keningau, Tambunan, Nabawan', 4.5, 6.0, 115.5, 117.0),
    JakimZone('SBH09', 'Sabah', 'Beaufort, Kuala Penyu, Sipitang, Tenom, Long Pasia, Membakut, Weston', 5.0, 5.8, 115.0, 116.0),

    # Sarawak
    JakimZone('SWK01', 'Sarawak', 'Limbang, Lawas, Sundar, Trusan', 4.5, 5.0, 114.8, 115.5),
    JakimZone('SWK02', 'Sarawak', 'Miri, Niah, Bekenu, Sibuti, Marudi', 3.5, 4.5, 113.5, 114.5),
    JakimZone('SWK03', 'Sarawak', 'Pandan, Belaga, Suai, Tatau, Sebauh, Bintulu', 2.5, 3.5, 112.5, 114.0),
    JakimZone('SWK04', 'Sarawak', 'Sibu, Mukah, Dalat, Song, Igan, Oya, Balingian, Kanowit, Kapit', 1.5, 2.5, 111.0, 113.5),
    JakimZone('SWK05', 'Sarawak', 'Sarikei, Matu, Julau, Rajang, Daro, Bintangor, Belawai', 1.5, 2.5, 110.5, 112.0),
    JakimZone('SWK06', 'Sarawak', 'Lubok Antu, Sri Aman, Roban, Debak, Kabong, Lingga, Engkelili, Betong, Spaoh, Pusa, Saratok', 1.0, 2.0, 110.5, 111.5),
    JakimZone('SWK07', 'Sarawak', 'Serian, Simunjan, Samarahan, Sebuyau, Meludam', 1.0, 1.8, 110.0, 111.0),
    JakimZone('SWK08', 'Sarawak', 'Kuching, Bau, Lundu, Sematan', 1.0, 2.0, 109.5, 110.5),
    JakimZone('SWK09', 'Sarawak', 'Zon Khas (Kampung Patarikan)', 1.5, 2.0, 111.5, 112.0),

    # Selangor
    JakimZone('SGR01', 'Selangor', 'Gombak, Petaling, Sepang, Hulu Langat, Hulu Selangor, Shah Alam', 2.8, 3.4, 101.4, 101.9),
    JakimZone('SGR02', 'Selangor', 'Kuala Selangor, Sabak Bernam', 3.4, 3.8, 101.0, 101.6),
    JakimZone('SGR03', 'Selangor', 'Klang, Kuala Langat', 2.7, 3.1, 101.3, 101.6),

    # Terengganu
    JakimZone('TRG01', 'Terengganu', 'Kuala Terengganu, Marang, Kuala Nerus', 5.0, 5.5, 102.8, 103.3),
    JakimZone('TRG02', 'Terengganu', 'Besut, Setiu', 5.5, 6.0, 102.4, 103.0),
    JakimZone('TRG03', 'Terengganu', 'Hulu Terengganu', 4.5, 5.5, 102.5, 103.2),
    JakimZone('TRG04', 'Terengganu', 'Dungun, Kemaman', 4.0, 5.0, 103.0, 103.8),

    # Wilayah Persekutuan
    JakimZone('WLY01', 'Wilayah Persekutuan', 'Kuala Lumpur, Putrajaya', 2.9, 3.3, 101.6, 101.8),
    JakimZone('WLY02', 'Wilayah Persekutuan', 'Labuan', 5.2, 5.4, 115.1, 115.3),
)

ZONE_REFERENCE_POINTS = tuple(zone.to_reference_point() for zone in JAKIM_ZONES)

JAKIM_ZONES_BY_CODE = {zone.code: zone for zone in JAKIM_ZONES}
