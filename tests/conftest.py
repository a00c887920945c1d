"""
Re-useable fixtures etc. for tests

See https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

from __future__ import annotations

import pandas as pd
import pytest

from energy_burden.dashboard import Dashboard
from energy_burden.geo.records import records_from_mapping
from energy_burden.metrics import Metric
from energy_burden.store import TimeSeriesStore

# Monthly values reported by the Oregon utilities, January 2024 to September 2025
OREGON_SERIES = {
    Metric.ACTIVE_ACCOUNTS: {
        "pge": [
            822345, 824585, 825786, 826711, 828581, 829774, 830947,
            832291, 831582, 833100, 834785, 835058, 835265, 837706,
            838355, 839466, 839880, 840422, 840707, 841383, 841869,
        ],
        "pac": [
            520138, 519816, 520585, 521119, 521566, 522229, 522499,
            523443, 523236, 523493, 523212, 523152, 523938, 524477,
            525758, 526185, 526977, 527535, 527778, 528166, 528315,
        ],
        "ipco": [
            14641, 14603, 14639, 14649, 14704, 14656, 14681,
            14684, 14698, 14711, 14683, 14716, 14700, 14686,
            14695, 14690, 14742, 14764, 14765, 14808, 14812,
        ],
        "nwn": [
            642904, 642992, 643112, 643915, 644027, 644368, 643678,
            643683, 643502, 645109, 645848, 647425, 648145, 648230,
            648494, 649069, 649069, 649110, 648638, 648421, 648036,
        ],
        "cng": [
            73546, 73585, 73747, 73836, 73911, 73855, 73990,
            73916, 73938, 74237, 74451, 74691, 74787, 74897,
            75031, 75155, 75122, 75112, 75141, 75129, 75260,
        ],
        "avista": [
            96285, 95323, 95334, 96344, 94870, 94982, 95090,
            95019, 95055, 95226, 95547, 95669, 95727, 94361,
            94525, 94450, 94325, 94206, 93140, 93110, 93103,
        ],
    },
    Metric.ARREARS_CUSTOMERS: {
        "pge": [
            130053, 124362, 116177, 112594, 115343, 123049, 118552,
            118736, 130600, 121071, 137380, 134869, 122501, 136015,
            146602, 121530, 121299, 123340, 125609, 126029, 129642,
        ],
        "pac": [
            105060, 114450, 113114, 113223, 114612, 114928, 109937,
            106709, 113639, 103542, 103223, 99730, 108808, 108967,
            113349, 115198, 119297, 109187, 109233, 110018, 108453,
        ],
        "ipco": [
            3899, 2907, 2931, 3381, 2756, 2884, 2787,
            2802, 2620, 2535, 2397, 3870, 2104, 2145,
            2125, 2113, 2029, 2050, 1922, 1994, 1944,
        ],
        "nwn": [
            45351, 50964, 49647, 51203, 50216, 54138, 52718,
            54789, 57007, 55356, 57337, 51517, 48660, 54496,
            50248, 50388, 55870, 51119, 53545, 57725, 55982,
        ],
        "cng": [
            4825, 5465, 5570, 5446, 5612, 5687, 5739,
            5355, 5976, 5252, 5085, 5580, 5318, 4996,
            5727, 5453, 5563, 5455, 5317, 5543, 5779,
        ],
        "avista": [
            9204, 8901, 9631, 9593, 9676, 10156, 9594,
            10231, 10240, 9429, 9868, 9461, 9249, 8769,
            9790, 9789, 10418, 10405, 10152, 10802, 9996,
        ],
    },
    Metric.ARREARS_BALANCE: {
        "pge": [
            17959201, 20327246, 18368566, 16757185, 15486669, 15188481, 14052669,
            15413638, 17062019, 14719328, 17215936, 17822143, 19974865, 24743042,
            28317962, 19892692, 17766195, 16187278, 15788242, 16724173, 17596343,
        ],
        "pac": [
            35822060, 39830544, 39270400, 38995673, 38386688, 36367616, 32375403,
            29613778, 30361323, 26091335, 24583206, 24352312, 29350814, 32405543,
            37020070, 38455283, 37311730, 31770839, 30297203, 29846409, 28529091,
        ],
        "ipco": [
            1249486, 1091698, 1093710, 1117246, 907108, 847407, 765004,
            748525, 693490, 590563, 562913, 987155, 680993, 794683,
            876919, 840663, 708343, 601597, 538700, 539545, 518853,
        ],
        "nwn": [
            6471439, 7682322, 7318112, 6908961, 6194965, 5917161, 4898960,
            4255535, 4154894, 4048138, 4295215, 5436400, 7132970, 8110503,
            7549449, 6824380, 7030485, 5219814, 4450767, 4204896, 3791976,
        ],
        "cng": [
            615537, 864716, 929819, 903333, 835282, 734965, 613611,
            465664, 369920, 300057, 321797, 504792, 626779, 685195,
            869440, 782137, 678650, 546828, 412773, 332785, 285775,
        ],
        "avista": [
            1322783, 1427726, 1539465, 1514320, 1428331, 1340671, 1116538,
            1028268, 945870, 838843, 862020, 1001221, 1282028, 1325945,
            1599574, 1505898, 1476147, 1340025, 1130967, 1005687, 851085,
        ],
    },
    Metric.ARREARS_BALANCE_31_60: {
        "pge": [
            11988178, 14271168, 12889541, 11638882, 10843329, 10499943, 9176388,
            11144875, 12475940, 9899837, 11092043, 11054210, 13804318, 16251667,
            17721826, 11727030, 11480713, 10160076, 10078212, 11236346, 12060399,
        ],
        "pac": [
            12952199, 17444225, 15672548, 15211526, 14052856, 12308716, 10999482,
            11658848, 13664446, 9645581, 9568842, 10545160, 15641569, 17020698,
            18792691, 17068489, 15715704, 11089503, 12003227, 11720519, 12787607,
        ],
        "ipco": [
            529849, 281959, 283713, 322592, 168689, 165800, 159550,
            193624, 173593, 117795, 118573, 476885, 299953, 347088,
            358269, 314591, 256963, 207116, 84168, 107768, 114652,
        ],
        "nwn": [
            4275152, 5421186, 4453641, 4089330, 3204468, 2716237, 1771080,
            1370970, 1298419, 1378168, 2037101, 3136505, 4924090, 5706013,
            4978082, 4299177, 3721189, 1994400, 1833141, 1555281, 1319720,
        ],
        "cng": [
            401849, 621139, 594702, 476018, 382115, 298697, 174019,
            125052, 131394, 110196, 146990, 309044, 403045, 437951,
            548612, 376062, 307241, 184604, 129932, 113062, 103516,
        ],
        "avista": [
            338911, 382127, 407557, 368139, 275849, 191781, 102452,
            105505, 95841, 91206, 92281, 105447, 139714, 140912,
            176831, 160412, 146834, 110217, 111349, 103730, 83710,
        ],
    },
    Metric.ARREARS_BALANCE_61_90: {
        "pge": [
            3467620, 3586460, 3306791, 3022518, 2622942, 2782089, 2674248,
            2360668, 2766000, 2840767, 3013430, 3657192, 3280178, 4716132,
            5679103, 4264896, 2993076, 3008977, 2792245, 2643244, 2692489,
        ],
        "pac": [
            4579592, 6164916, 8262188, 8207479, 8155967, 7664109, 6086494,
            5067663, 5448035, 6526735, 5600247, 4431317, 4842347, 6674482,
            8441392, 10081774, 9368008, 8096878, 5965334, 5409144, 5419016,
        ],
        "ipco": [
            115495, 206925, 164565, 157655, 143805, 84426, 85194,
            82494, 119581, 109938, 64135, 115471, 102251, 137992,
            171011, 162645, 136167, 125233, 60089, 73298, 83589,
        ],
        "nwn": [
            1052858, 1181040, 1703159, 1380643, 1512652, 1376398, 1149156,
            929279, 801140, 688914, 685053, 946581, 1100364, 1361286,
            1505821, 1297977, 1751054, 1476520, 813701, 964134, 796478,
        ],
        "cng": [
            108902, 138575, 205252, 238933, 209839, 171001, 160946,
            94550, 61895, 56584, 57593, 86761, 105008, 121184,
            186070, 228712, 171502, 157566, 86929, 67178, 54892,
        ],
        "avista": [
            227094, 298425, 332286, 334635, 299511, 248856, 147647,
            96832, 91660, 79349, 79789, 96373, 114689, 131498,
            165041, 163247, 163166, 139591, 127304, 113466, 81182,
        ],
    },
    Metric.ARREARS_BALANCE_91_PLUS: {
        "pge": [
            2503403, 2469618, 2172234, 2095786, 2020397, 1906450, 2202032,
            1908095, 1820078, 1978723, 3110463, 3110741, 2890369, 3775244,
            4917034, 3900766, 3292405, 3018225, 2917785, 2844583, 2843455,
        ],
        "pac": [
            18290269, 16221403, 15335664, 15576668, 16177865, 16394791, 15289427,
            12887267, 11248842, 9919019, 9414117, 9375835, 8866898, 8710363,
            9785987, 11305020, 12228018, 12584458, 11877848, 13167539, 10322469,
        ],
        "ipco": [
            604142, 602814, 645432, 636999, 594614, 597181, 520260,
            472407, 400316, 362830, 380205, 394799, 278789, 309603,
            347639, 363427, 315213, 269248, 394443, 358479, 320612,
        ],
        "nwn": [
            1143429, 1080096, 1161312, 1438988, 1477845, 1824526, 1978724,
            1955286, 2055335, 1981056, 1573061, 1353314, 1108516, 1043204,
            1065546, 1227226, 1558242, 1748894, 1803925, 1685482, 1675778,
        ],
        "cng": [
            104786, 105002, 129865, 188382, 243328, 265267, 278646,
            246062, 176631, 133277, 117214, 108987, 118726, 126060,
            134758, 177363, 199907, 204658, 195912, 152545, 127367,
        ],
        "avista": [
            756778, 747174, 799622, 811546, 852971, 900034, 866439,
            825931, 758369, 668288, 689950, 799401, 1027625, 1053535,
            1257702, 1182239, 1166147, 1090217, 892314, 788490, 686193,
        ],
    },
    Metric.DISCONNECTIONS: {
        "pge": [
            761, 2216, 2403, 4521, 4044, 3269, 3087,
            3300, 3428, 4180, 2541, 336, 365, 1376,
            2610, 4600, 4753, 3138, 3871, 2088, 4081,
        ],
        "pac": [
            3245, 2600, 2463, 3129, 2255, 2534, 1938,
            2094, 2017, 2979, 1509, 850, 366, 478,
            1295, 1554, 3916, 3190, 2627, 1874, 2833,
        ],
        "ipco": [
            43, 69, 86, 55, 52, 46, 10,
            57, 43, 71, 18, 12, 45, 36,
            37, 72, 39, 58, 51, 47, 47,
        ],
        "nwn": [
            590, 938, 633, 906, 1209, 869, 1058,
            997, 56, 872, 646, 400, 462, 899,
            1527, 1803, 999, 1426, 1594, 1023, 826,
        ],
        "cng": [
            1, 3, 29, 62, 81, 47, 80,
            98, 99, 33, 10, 5, 0, 0,
            12, 92, 126, 54, 46, 26, 30,
        ],
        "avista": [
            140, 135, 105, 187, 138, 140, 156,
            100, 45, 79, 49, 72, 68, 107,
            111, 114, 98, 63, 71, 47, 83,
        ],
    },
    Metric.DISCONNECTION_PCT: {
        "pge": [
            0.093, 0.269, 0.291, 0.547, 0.488, 0.394, 0.372,
            0.396, 0.412, 0.502, 0.304, 0.04, 0.044, 0.164,
            0.311, 0.548, 0.566, 0.373, 0.46, 0.248, 0.485,
        ],
        "pac": [
            0.624, 0.5, 0.473, 0.6, 0.432, 0.485, 0.371,
            0.4, 0.385, 0.569, 0.288, 0.162, 0.07, 0.091,
            0.246, 0.295, 0.743, 0.605, 0.498, 0.355, 0.536,
        ],
        "ipco": [
            0.294, 0.473, 0.587, 0.375, 0.354, 0.314, 0.068,
            0.388, 0.293, 0.483, 0.123, 0.082, 0.306, 0.245,
            0.252, 0.49, 0.265, 0.393, 0.345, 0.317, 0.317,
        ],
        "nwn": [
            0.092, 0.146, 0.098, 0.141, 0.188, 0.135, 0.164,
            0.155, 0.009, 0.135, 0.1, 0.062, 0.071, 0.139,
            0.235, 0.278, 0.154, 0.22, 0.246, 0.158, 0.127,
        ],
        "cng": [
            0.001, 0.004, 0.039, 0.084, 0.11, 0.064, 0.108,
            0.133, 0.134, 0.044, 0.013, 0.007, 0.0, 0.0,
            0.016, 0.122, 0.168, 0.072, 0.061, 0.035, 0.04,
        ],
        "avista": [
            0.145, 0.142, 0.11, 0.194, 0.145, 0.147, 0.164,
            0.105, 0.047, 0.083, 0.051, 0.075, 0.071, 0.113,
            0.117, 0.121, 0.104, 0.067, 0.076, 0.05, 0.089,
        ],
    },
    Metric.RECONNECTIONS: {
        "pge": [
            534, 2018, 2174, 3956, 3694, 2820, 2665,
            2917, 2978, 3766, 2300, 300, 330, 1200,
            2300, 4000, 4200, 2800, 3473, 1885, 3655,
        ],
        "pac": [
            1919, 1813, 1789, 2307, 1612, 2243, 1258,
            1629, 1493, 2352, 1200, 680, 290, 380,
            1030, 1240, 3130, 2550, 2075, 1492, 2218,
        ],
        "nwn": [
            369, 582, 372, 488, 585, 432, 462,
            430, 28, 508, 400, 250, 290, 560,
            950, 1120, 620, 890, 746, 530, 509,
        ],
        "avista": [
            72, 76, 60, 95, 55, 61, 73,
            39, 15, 46, 30, 45, 43, 67,
            70, 72, 62, 40, 67, 47, 75,
        ],
        "cng": [
            0, 0, 17, 17, 24, 16, 12,
            27, 43, 12, 6, 3, 0, 0,
            8, 58, 80, 34, 19, 9, 11,
        ],
        "ipco": [
            38, 60, 75, 47, 39, 39, 6,
            48, 37, 58, 14, 9, 36, 29,
            30, 58, 31, 46, 45, 39, 42,
        ],
    },
    Metric.BILL_DISCOUNT_PARTICIPANTS: {
        "avista": [
            7864, 8307, 8454, 9694, 9910, 8803, 10139,
            10123, 9034, 10444, 9397, 11009, 10912, 10287,
            11365, 11401, 11343, 11268, 11145, 10996, 10855,
        ],
        "pge": [
            63969, 67475, 77393, 82662, 84925, 85445, 85446,
            85781, 85796, 85982, 84412, 87592, 89009, 91879,
            95225, 97757, 99074, 99769, 100371, 99848, 101371,
        ],
        "pac": [
            43831, 45761, 47412, 48698, 50349, 48877, 51379,
            53740, 51420, 59601, 54802, 61842, 64169, 64734,
            68895, 70482, 71505, 72194, 68294, 71194, 66673,
        ],
        "ipco": [
            0, 0, 0, 0, 0, 0, 0,
            0, 0, 0, 3, 222, 726, 897,
            1113, 1246, 1314, 1378, 1408, 1429, 1451,
        ],
        "nwn": [
            35217, 37323, 38842, 39862, 40491, 40636, 40710,
            41040, 41272, 43418, 42839, 43298, 44446, 45084,
            45634, 46254, 39548, 46396, 46268, 46007, 46107,
        ],
        "cng": [
            3547, 3781, 3975, 4063, 4077, 4073, 4082,
            4072, 4035, 3845, 3925, 4067, 4236, 4421,
            4524, 4617, 4640, 4637, 4615, 4620, 4641,
        ],
    },
    Metric.BILL_DISCOUNT_DOLLARS: {
        "avista": [
            253457, 231510, 238938, 215194, 170248, 79881, 82739,
            67597, 67862, 110457, 180462, 349087, 362621, 387060,
            335362, 250393, 150281, 107002, 83328, 75505, 79227,
        ],
        "pge": [
            3176059, 3542327, 4306227, 3192056, 2990368, 2840207, 3235956,
            3422523, 3147988, 2899255, 3279126, 4874681, 5234060, 5753932,
            4849047, 4152831, 3522412, 3824460, 4672513, 4773612, 5068408,
        ],
        "pac": [
            2000601, 1873009, 1915684, 1697019, 1583586, 1376286, 1676023,
            1923305, 1526292, 1801344, 1842180, 2967619, 3404053, 3890344,
            3436326, 3066211, 2492352, 2582302, 3002118, 2917650, 2834532,
        ],
        "ipco": [
            0, 0, 0, 0, 0, 0, 0,
            0, 0, 0, 237, 22460, 75710, 105810,
            112476, 89704, 72382, 79626, 103671, 97433, 99829,
        ],
        "nwn": [
            1142902, 894213, 968551, 684249, 539225, 362570, 246153,
            219365, 236905, 332625, 1145501, 2353805, 2638850, 2377700,
            2083557, 1584665, 864803, 754111, 573975, 492952, 507902,
        ],
        "cng": [
            189262, 184189, 178434, 144836, 114678, 68236, 46462,
            40571, 42964, 64370, 126173, 204770, 248102, 267887,
            223408, 167231, 106119, 74674, 54676, 47743, 50493,
        ],
    },
    Metric.AVERAGE_BILL: {
        "pge": [
            219, 182, 163, 152, 113, 103, 123,
            158, 116, 124, 128, 197, 226, 212,
            190, 158, 108, 133, 126, 139, 102,
        ],
        "pac": [
            196, 174, 166, 146, 131, 116, 136,
            144, 119, 130, 139, 194, 215, 213,
            175, 155, 124, 125, 146, 137, 138,
        ],
        "ipco": [
            174, 173, 148, 110, 96, 88, 109,
            125, 92, 77, 115, 164, 172, 190,
            157, 112, 89, 96, 120, 117, 112,
        ],
        "nwn": [
            140, 105, 110, 75, 60, 40, 28,
            24, 26, 34, 70, 133, 146, 131,
            113, 85, 54, 39, 31, 28, 28,
        ],
        "cng": [
            144, 115, 101, 75, 55, 35, 23,
            20, 21, 32, 61, 97, 113, 116,
            85, 62, 40, 28, 25, 21, 23,
        ],
        "avista": [
            104, 94, 93, 72, 55, 37, 30,
            28, 30, 35, 62, 97, 104, 112,
            87, 65, 46, 35, 29, 27, 28,
        ],
    },
    Metric.AVERAGE_USAGE: {
        "pge": [
            1290, 992, 891, 814, 608, 553, 663,
            834, 613, 641, 681, 1072, 1185, 1089,
            964, 797, 548, 669, 636, 701, 525,
        ],
        "pac": [
            1436, 1188, 1134, 971, 846, 737, 875,
            931, 759, 826, 913, 1317, 1419, 1362,
            1100, 944, 726, 733, 864, 806, 813,
        ],
        "ipco": [
            1454, 1453, 1248, 924, 798, 756, 1006,
            1161, 850, 688, 901, 1307, 1406, 1567,
            1312, 935, 726, 792, 991, 1016, 943,
        ],
        "nwn": [
            99, 84, 77, 51, 39, 24, 15,
            12, 14, 20, 46, 90, 95, 105,
            71, 50, 30, 20, 14, 11, 12,
        ],
        "cng": [
            116, 91, 80, 58, 41, 24, 14,
            11, 12, 22, 50, 91, 106, 108,
            77, 54, 32, 21, 17, 14, 15,
        ],
        "avista": [
            80, 69, 68, 49, 34, 18, 11,
            10, 11, 16, 44, 82, 86, 91,
            68, 47, 28, 17, 11, 9, 10,
        ],
    },
}

# A selection of the ZIP-level records reported for April to June 2025
OREGON_GEO_DATA = {
    "pge": [
        {
            "zip": "97003",
            "lat": 45.527,
            "lng": -122.887,
            "apr": {"active": 11334, "arrears": 1862, "disc": 69},
            "may": {"active": 11323, "arrears": 1821, "disc": 84},
            "jun": {"active": 11325, "arrears": 1941, "disc": 68},
        },
        {
            "zip": "97233",
            "lat": 45.517,
            "lng": -122.5,
            "apr": {"active": 15703, "arrears": 4343, "disc": 229},
            "may": {"active": 15697, "arrears": 4228, "disc": 233},
            "jun": {"active": 15684, "arrears": 4428, "disc": 164},
        },
        {
            "zip": "97301",
            "lat": 44.932,
            "lng": -122.999,
            "apr": {"active": 20152, "arrears": 4868, "disc": 227},
            "may": {"active": 20175, "arrears": 4753, "disc": 242},
            "jun": {"active": 20315, "arrears": 4846, "disc": 158},
        },
    ],
    "nwn": [
        {
            "zip": "97003",
            "lat": 45.527,
            "lng": -122.887,
            "apr": {"active": 7027, "arrears": 665, "disc": 29},
            "may": {"active": 7032, "arrears": 709, "disc": 0},
            "jun": {"active": 7039, "arrears": 689, "disc": 32},
        },
        {
            "zip": "97211",
            "lat": 45.576,
            "lng": -122.638,
            "apr": {"active": 10561, "arrears": 760, "disc": 49},
            "may": {"active": 10560, "arrears": 971, "disc": 28},
            "jun": {"active": 10544, "arrears": 850, "disc": 17},
        },
    ],
    "avista": [
        {
            "zip": "97520",
            "lat": 42.2,
            "lng": -122.7,
            "apr": {"active": 13106, "arrears": 997, "disc": 16},
            "may": {"active": 13097, "arrears": 1122, "disc": 14},
            "jun": {"active": 13115, "arrears": 1141, "disc": 9},
        },
    ],
    "cng": [
        {
            "zip": "97701",
            "lat": 44.06,
            "lng": -121.31,
            "apr": {"active": 10842, "arrears": 576, "disc": 2},
            "may": {"active": 10821, "arrears": 621, "disc": 14},
            "jun": {"active": 10857, "arrears": 625, "disc": 1},
        },
    ],
    "pac": [
        {
            "zip": "97211",
            "lat": 45.576,
            "lng": -122.638,
            "apr": {"active": 15281, "arrears": 2477, "disc": 34},
            "may": {"active": 15342, "arrears": 2547, "disc": 80},
            "jun": {"active": 15348, "arrears": 2348, "disc": 48},
        },
        {
            "zip": "97501",
            "lat": 42.33,
            "lng": -122.87,
            "apr": {"active": 19469, "arrears": 4844, "disc": 90},
            "may": {"active": 19520, "arrears": 4640, "disc": 178},
            "jun": {"active": 19540, "arrears": 4340, "disc": 201},
        },
        {
            "zip": "97701",
            "lat": 44.06,
            "lng": -121.31,
            "apr": {"active": 14440, "arrears": 2592, "disc": 21},
            "may": {"active": 14497, "arrears": 2508, "disc": 61},
            "jun": {"active": 14518, "arrears": 2446, "disc": 26},
        },
    ],
    "ipco": [
        {
            "zip": "97914",
            "lat": 44.05,
            "lng": -116.97,
            "apr": {"active": 7106, "arrears": 1223, "disc": 41},
            "may": {"active": 7117, "arrears": 1171, "disc": 22},
            "jun": {"active": 7132, "arrears": 1110, "disc": 35},
        },
        {
            # Too few accounts to be displayed
            "zip": "97910",
            "lat": 43.12,
            "lng": -117.02,
            "apr": {"active": 18, "arrears": 3, "disc": 1},
            "may": {"active": 20, "arrears": 4, "disc": 1},
            "jun": {"active": 21, "arrears": 2, "disc": 0},
        },
    ],
}


@pytest.fixture(scope="session", autouse=True)
def pandas_terminal_width():
    # Set pandas terminal width so that doctests don't depend on terminal width.

    # We set the display width to 120 because examples should be short,
    # anything more than this is too wide to read in the source.
    pd.set_option("display.width", 120)

    # Display as many columns as you want (i.e. let the display width do the
    # truncation)
    pd.set_option("display.max_columns", 1000)


@pytest.fixture(scope="session")
def oregon_store() -> TimeSeriesStore:
    return TimeSeriesStore.from_series(OREGON_SERIES)


@pytest.fixture(scope="session")
def oregon_geo_records():
    return records_from_mapping(OREGON_GEO_DATA)


@pytest.fixture
def oregon_dashboard(oregon_store, oregon_geo_records) -> Dashboard:
    return Dashboard(store=oregon_store, geo_records=oregon_geo_records)


@pytest.fixture
def get_store():
    """
    Build a store from a mapping of metric to utility to values
    """

    def _get_store(series, n_months=None, **kwargs):
        if n_months is not None:
            kwargs["months"] = pd.period_range(
                "2024-01", periods=n_months, freq="M", name="month"
            )

        return TimeSeriesStore.from_series(series, **kwargs)

    return _get_store

