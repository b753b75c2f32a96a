# This file is generated by `python -m jurisdiction.compiler`. Do not edit.
"""Compiled ISO 3166 and UN M49 classification tables."""
from jurisdiction.codes import AlphaCode, HierarchyClass
from jurisdiction.definition import Definition


class Alpha2(AlphaCode):
    """Two alpha character ISO 3166 country code."""

    AF = 'AF'
    AX = 'AX'
    AL = 'AL'
    DZ = 'DZ'
    AS = 'AS'
    AD = 'AD'
    AO = 'AO'
    AI = 'AI'
    AQ = 'AQ'
    AG = 'AG'
    AR = 'AR'
    AM = 'AM'
    AW = 'AW'
    AU = 'AU'
    AT = 'AT'
    AZ = 'AZ'
    BS = 'BS'
    BH = 'BH'
    BD = 'BD'
    BB = 'BB'
    BY = 'BY'
    BE = 'BE'
    BZ = 'BZ'
    BJ = 'BJ'
    BM = 'BM'
    BT = 'BT'
    BO = 'BO'
    BQ = 'BQ'
    BA = 'BA'
    BW = 'BW'
    BV = 'BV'
    BR = 'BR'
    IO = 'IO'
    BN = 'BN'
    BG = 'BG'
    BF = 'BF'
    BI = 'BI'
    CV = 'CV'
    KH = 'KH'
    CM = 'CM'
    CA = 'CA'
    KY = 'KY'
    CF = 'CF'
    TD = 'TD'
    CL = 'CL'
    CN = 'CN'
    CX = 'CX'
    CC = 'CC'
    CO = 'CO'
    KM = 'KM'
    CG = 'CG'
    CD = 'CD'
    CK = 'CK'
    CR = 'CR'
    CI = 'CI'
    HR = 'HR'
    CU = 'CU'
    CW = 'CW'
    CY = 'CY'
    CZ = 'CZ'
    DK = 'DK'
    DJ = 'DJ'
    DM = 'DM'
    DO = 'DO'
    EC = 'EC'
    EG = 'EG'
    SV = 'SV'
    GQ = 'GQ'
    ER = 'ER'
    EE = 'EE'
    SZ = 'SZ'
    ET = 'ET'
    FK = 'FK'
    FO = 'FO'
    FJ = 'FJ'
    FI = 'FI'
    FR = 'FR'
    GF = 'GF'
    PF = 'PF'
    TF = 'TF'
    GA = 'GA'
    GM = 'GM'
    GE = 'GE'
    DE = 'DE'
    GH = 'GH'
    GI = 'GI'
    GR = 'GR'
    GL = 'GL'
    GD = 'GD'
    GP = 'GP'
    GU = 'GU'
    GT = 'GT'
    GG = 'GG'
    GN = 'GN'
    GW = 'GW'
    GY = 'GY'
    HT = 'HT'
    HM = 'HM'
    VA = 'VA'
    HN = 'HN'
    HK = 'HK'
    HU = 'HU'
    IS = 'IS'
    IN = 'IN'
    ID = 'ID'
    IR = 'IR'
    IQ = 'IQ'
    IE = 'IE'
    IM = 'IM'
    IL = 'IL'
    IT = 'IT'
    JM = 'JM'
    JP = 'JP'
    JE = 'JE'
    JO = 'JO'
    KZ = 'KZ'
    KE = 'KE'
    KI = 'KI'
    KP = 'KP'
    KR = 'KR'
    KW = 'KW'
    KG = 'KG'
    LA = 'LA'
    LV = 'LV'
    LB = 'LB'
    LS = 'LS'
    LR = 'LR'
    LY = 'LY'
    LI = 'LI'
    LT = 'LT'
    LU = 'LU'
    MO = 'MO'
    MG = 'MG'
    MW = 'MW'
    MY = 'MY'
    MV = 'MV'
    ML = 'ML'
    MT = 'MT'
    MH = 'MH'
    MQ = 'MQ'
    MR = 'MR'
    MU = 'MU'
    YT = 'YT'
    MX = 'MX'
    FM = 'FM'
    MD = 'MD'
    MC = 'MC'
    MN = 'MN'
    ME = 'ME'
    MS = 'MS'
    MA = 'MA'
    MZ = 'MZ'
    MM = 'MM'
    NA = 'NA'
    NR = 'NR'
    NP = 'NP'
    NL = 'NL'
    NC = 'NC'
    NZ = 'NZ'
    NI = 'NI'
    NE = 'NE'
    NG = 'NG'
    NU = 'NU'
    NF = 'NF'
    MK = 'MK'
    MP = 'MP'
    NO = 'NO'
    OM = 'OM'
    PK = 'PK'
    PW = 'PW'
    PS = 'PS'
    PA = 'PA'
    PG = 'PG'
    PY = 'PY'
    PE = 'PE'
    PH = 'PH'
    PN = 'PN'
    PL = 'PL'
    PT = 'PT'
    PR = 'PR'
    QA = 'QA'
    RE = 'RE'
    RO = 'RO'
    RU = 'RU'
    RW = 'RW'
    BL = 'BL'
    SH = 'SH'
    KN = 'KN'
    LC = 'LC'
    MF = 'MF'
    PM = 'PM'
    VC = 'VC'
    WS = 'WS'
    SM = 'SM'
    ST = 'ST'
    SA = 'SA'
    SN = 'SN'
    RS = 'RS'
    SC = 'SC'
    SL = 'SL'
    SG = 'SG'
    SX = 'SX'
    SK = 'SK'
    SI = 'SI'
    SB = 'SB'
    SO = 'SO'
    ZA = 'ZA'
    GS = 'GS'
    SS = 'SS'
    ES = 'ES'
    LK = 'LK'
    SD = 'SD'
    SR = 'SR'
    SJ = 'SJ'
    SE = 'SE'
    CH = 'CH'
    SY = 'SY'
    TW = 'TW'
    TJ = 'TJ'
    TZ = 'TZ'
    TH = 'TH'
    TL = 'TL'
    TG = 'TG'
    TK = 'TK'
    TO = 'TO'
    TT = 'TT'
    TN = 'TN'
    TR = 'TR'
    TM = 'TM'
    TC = 'TC'
    TV = 'TV'
    UG = 'UG'
    UA = 'UA'
    AE = 'AE'
    GB = 'GB'
    US = 'US'
    UM = 'UM'
    UY = 'UY'
    UZ = 'UZ'
    VU = 'VU'
    VE = 'VE'
    VN = 'VN'
    VG = 'VG'
    VI = 'VI'
    WF = 'WF'
    EH = 'EH'
    YE = 'YE'
    ZM = 'ZM'
    ZW = 'ZW'


class Alpha3(AlphaCode):
    """Three alpha character ISO 3166 country code."""

    AFG = 'AFG'
    ALA = 'ALA'
    ALB = 'ALB'
    DZA = 'DZA'
    ASM = 'ASM'
    AND = 'AND'
    AGO = 'AGO'
    AIA = 'AIA'
    ATA = 'ATA'
    ATG = 'ATG'
    ARG = 'ARG'
    ARM = 'ARM'
    ABW = 'ABW'
    AUS = 'AUS'
    AUT = 'AUT'
    AZE = 'AZE'
    BHS = 'BHS'
    BHR = 'BHR'
    BGD = 'BGD'
    BRB = 'BRB'
    BLR = 'BLR'
    BEL = 'BEL'
    BLZ = 'BLZ'
    BEN = 'BEN'
    BMU = 'BMU'
    BTN = 'BTN'
    BOL = 'BOL'
    BES = 'BES'
    BIH = 'BIH'
    BWA = 'BWA'
    BVT = 'BVT'
    BRA = 'BRA'
    IOT = 'IOT'
    BRN = 'BRN'
    BGR = 'BGR'
    BFA = 'BFA'
    BDI = 'BDI'
    CPV = 'CPV'
    KHM = 'KHM'
    CMR = 'CMR'
    CAN = 'CAN'
    CYM = 'CYM'
    CAF = 'CAF'
    TCD = 'TCD'
    CHL = 'CHL'
    CHN = 'CHN'
    CXR = 'CXR'
    CCK = 'CCK'
    COL = 'COL'
    COM = 'COM'
    COG = 'COG'
    COD = 'COD'
    COK = 'COK'
    CRI = 'CRI'
    CIV = 'CIV'
    HRV = 'HRV'
    CUB = 'CUB'
    CUW = 'CUW'
    CYP = 'CYP'
    CZE = 'CZE'
    DNK = 'DNK'
    DJI = 'DJI'
    DMA = 'DMA'
    DOM = 'DOM'
    ECU = 'ECU'
    EGY = 'EGY'
    SLV = 'SLV'
    GNQ = 'GNQ'
    ERI = 'ERI'
    EST = 'EST'
    SWZ = 'SWZ'
    ETH = 'ETH'
    FLK = 'FLK'
    FRO = 'FRO'
    FJI = 'FJI'
    FIN = 'FIN'
    FRA = 'FRA'
    GUF = 'GUF'
    PYF = 'PYF'
    ATF = 'ATF'
    GAB = 'GAB'
    GMB = 'GMB'
    GEO = 'GEO'
    DEU = 'DEU'
    GHA = 'GHA'
    GIB = 'GIB'
    GRC = 'GRC'
    GRL = 'GRL'
    GRD = 'GRD'
    GLP = 'GLP'
    GUM = 'GUM'
    GTM = 'GTM'
    GGY = 'GGY'
    GIN = 'GIN'
    GNB = 'GNB'
    GUY = 'GUY'
    HTI = 'HTI'
    HMD = 'HMD'
    VAT = 'VAT'
    HND = 'HND'
    HKG = 'HKG'
    HUN = 'HUN'
    ISL = 'ISL'
    IND = 'IND'
    IDN = 'IDN'
    IRN = 'IRN'
    IRQ = 'IRQ'
    IRL = 'IRL'
    IMN = 'IMN'
    ISR = 'ISR'
    ITA = 'ITA'
    JAM = 'JAM'
    JPN = 'JPN'
    JEY = 'JEY'
    JOR = 'JOR'
    KAZ = 'KAZ'
    KEN = 'KEN'
    KIR = 'KIR'
    PRK = 'PRK'
    KOR = 'KOR'
    KWT = 'KWT'
    KGZ = 'KGZ'
    LAO = 'LAO'
    LVA = 'LVA'
    LBN = 'LBN'
    LSO = 'LSO'
    LBR = 'LBR'
    LBY = 'LBY'
    LIE = 'LIE'
    LTU = 'LTU'
    LUX = 'LUX'
    MAC = 'MAC'
    MDG = 'MDG'
    MWI = 'MWI'
    MYS = 'MYS'
    MDV = 'MDV'
    MLI = 'MLI'
    MLT = 'MLT'
    MHL = 'MHL'
    MTQ = 'MTQ'
    MRT = 'MRT'
    MUS = 'MUS'
    MYT = 'MYT'
    MEX = 'MEX'
    FSM = 'FSM'
    MDA = 'MDA'
    MCO = 'MCO'
    MNG = 'MNG'
    MNE = 'MNE'
    MSR = 'MSR'
    MAR = 'MAR'
    MOZ = 'MOZ'
    MMR = 'MMR'
    NAM = 'NAM'
    NRU = 'NRU'
    NPL = 'NPL'
    NLD = 'NLD'
    NCL = 'NCL'
    NZL = 'NZL'
    NIC = 'NIC'
    NER = 'NER'
    NGA = 'NGA'
    NIU = 'NIU'
    NFK = 'NFK'
    MKD = 'MKD'
    MNP = 'MNP'
    NOR = 'NOR'
    OMN = 'OMN'
    PAK = 'PAK'
    PLW = 'PLW'
    PSE = 'PSE'
    PAN = 'PAN'
    PNG = 'PNG'
    PRY = 'PRY'
    PER = 'PER'
    PHL = 'PHL'
    PCN = 'PCN'
    POL = 'POL'
    PRT = 'PRT'
    PRI = 'PRI'
    QAT = 'QAT'
    REU = 'REU'
    ROU = 'ROU'
    RUS = 'RUS'
    RWA = 'RWA'
    BLM = 'BLM'
    SHN = 'SHN'
    KNA = 'KNA'
    LCA = 'LCA'
    MAF = 'MAF'
    SPM = 'SPM'
    VCT = 'VCT'
    WSM = 'WSM'
    SMR = 'SMR'
    STP = 'STP'
    SAU = 'SAU'
    SEN = 'SEN'
    SRB = 'SRB'
    SYC = 'SYC'
    SLE = 'SLE'
    SGP = 'SGP'
    SXM = 'SXM'
    SVK = 'SVK'
    SVN = 'SVN'
    SLB = 'SLB'
    SOM = 'SOM'
    ZAF = 'ZAF'
    SGS = 'SGS'
    SSD = 'SSD'
    ESP = 'ESP'
    LKA = 'LKA'
    SDN = 'SDN'
    SUR = 'SUR'
    SJM = 'SJM'
    SWE = 'SWE'
    CHE = 'CHE'
    SYR = 'SYR'
    TWN = 'TWN'
    TJK = 'TJK'
    TZA = 'TZA'
    THA = 'THA'
    TLS = 'TLS'
    TGO = 'TGO'
    TKL = 'TKL'
    TON = 'TON'
    TTO = 'TTO'
    TUN = 'TUN'
    TUR = 'TUR'
    TKM = 'TKM'
    TCA = 'TCA'
    TUV = 'TUV'
    UGA = 'UGA'
    UKR = 'UKR'
    ARE = 'ARE'
    GBR = 'GBR'
    USA = 'USA'
    UMI = 'UMI'
    URY = 'URY'
    UZB = 'UZB'
    VUT = 'VUT'
    VEN = 'VEN'
    VNM = 'VNM'
    VGB = 'VGB'
    VIR = 'VIR'
    WLF = 'WLF'
    ESH = 'ESH'
    YEM = 'YEM'
    ZMB = 'ZMB'
    ZWE = 'ZWE'


class Region(HierarchyClass):
    """The high level UN M49 region a jurisdiction zones to."""

    Asia = 'Asia'
    Europe = 'Europe'
    Africa = 'Africa'
    Oceania = 'Oceania'
    Americas = 'Americas'
    Undefined = ''


class SubRegion(HierarchyClass):
    """A subdivision within a Region."""

    SouthernAsia = 'Southern Asia'
    NorthernEurope = 'Northern Europe'
    SouthernEurope = 'Southern Europe'
    NorthernAfrica = 'Northern Africa'
    Polynesia = 'Polynesia'
    SubSaharanAfrica = 'Sub-Saharan Africa'
    LatinAmericaAndTheCaribbean = 'Latin America and the Caribbean'
    WesternAsia = 'Western Asia'
    AustraliaAndNewZealand = 'Australia and New Zealand'
    WesternEurope = 'Western Europe'
    EasternEurope = 'Eastern Europe'
    NorthernAmerica = 'Northern America'
    SouthEasternAsia = 'South-eastern Asia'
    EasternAsia = 'Eastern Asia'
    Melanesia = 'Melanesia'
    Micronesia = 'Micronesia'
    CentralAsia = 'Central Asia'
    Undefined = ''


class IntermediateRegion(HierarchyClass):
    """A subdivision within a SubRegion."""

    MiddleAfrica = 'Middle Africa'
    Caribbean = 'Caribbean'
    SouthAmerica = 'South America'
    CentralAmerica = 'Central America'
    WesternAfrica = 'Western Africa'
    SouthernAfrica = 'Southern Africa'
    EasternAfrica = 'Eastern Africa'
    ChannelIslands = 'Channel Islands'
    Undefined = ''


DEFINITIONS: tuple[Definition, ...] = (
    Definition(4, 'Afghanistan', Alpha2.AF, Alpha3.AFG, 'ISO 3166-2:AF', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(248, 'Åland Islands', Alpha2.AX, Alpha3.ALA, 'ISO 3166-2:AX', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(8, 'Albania', Alpha2.AL, Alpha3.ALB, 'ISO 3166-2:AL', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(12, 'Algeria', Alpha2.DZ, Alpha3.DZA, 'ISO 3166-2:DZ', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(16, 'American Samoa', Alpha2.AS, Alpha3.ASM, 'ISO 3166-2:AS', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(20, 'Andorra', Alpha2.AD, Alpha3.AND, 'ISO 3166-2:AD', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(24, 'Angola', Alpha2.AO, Alpha3.AGO, 'ISO 3166-2:AO', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(660, 'Anguilla', Alpha2.AI, Alpha3.AIA, 'ISO 3166-2:AI', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(10, 'Antarctica', Alpha2.AQ, Alpha3.ATA, 'ISO 3166-2:AQ', Region.Undefined, SubRegion.Undefined, IntermediateRegion.Undefined, 0, 0, None),
    Definition(28, 'Antigua and Barbuda', Alpha2.AG, Alpha3.ATG, 'ISO 3166-2:AG', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(32, 'Argentina', Alpha2.AR, Alpha3.ARG, 'ISO 3166-2:AR', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(51, 'Armenia', Alpha2.AM, Alpha3.ARM, 'ISO 3166-2:AM', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(533, 'Aruba', Alpha2.AW, Alpha3.ABW, 'ISO 3166-2:AW', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(36, 'Australia', Alpha2.AU, Alpha3.AUS, 'ISO 3166-2:AU', Region.Oceania, SubRegion.AustraliaAndNewZealand, IntermediateRegion.Undefined, 9, 53, None),
    Definition(40, 'Austria', Alpha2.AT, Alpha3.AUT, 'ISO 3166-2:AT', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(31, 'Azerbaijan', Alpha2.AZ, Alpha3.AZE, 'ISO 3166-2:AZ', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(44, 'Bahamas', Alpha2.BS, Alpha3.BHS, 'ISO 3166-2:BS', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(48, 'Bahrain', Alpha2.BH, Alpha3.BHR, 'ISO 3166-2:BH', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(50, 'Bangladesh', Alpha2.BD, Alpha3.BGD, 'ISO 3166-2:BD', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(52, 'Barbados', Alpha2.BB, Alpha3.BRB, 'ISO 3166-2:BB', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(112, 'Belarus', Alpha2.BY, Alpha3.BLR, 'ISO 3166-2:BY', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(56, 'Belgium', Alpha2.BE, Alpha3.BEL, 'ISO 3166-2:BE', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(84, 'Belize', Alpha2.BZ, Alpha3.BLZ, 'ISO 3166-2:BZ', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(204, 'Benin', Alpha2.BJ, Alpha3.BEN, 'ISO 3166-2:BJ', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(60, 'Bermuda', Alpha2.BM, Alpha3.BMU, 'ISO 3166-2:BM', Region.Americas, SubRegion.NorthernAmerica, IntermediateRegion.Undefined, 19, 21, None),
    Definition(64, 'Bhutan', Alpha2.BT, Alpha3.BTN, 'ISO 3166-2:BT', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(68, 'Bolivia (Plurinational State of)', Alpha2.BO, Alpha3.BOL, 'ISO 3166-2:BO', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(535, 'Bonaire, Sint Eustatius and Saba', Alpha2.BQ, Alpha3.BES, 'ISO 3166-2:BQ', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(70, 'Bosnia and Herzegovina', Alpha2.BA, Alpha3.BIH, 'ISO 3166-2:BA', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(72, 'Botswana', Alpha2.BW, Alpha3.BWA, 'ISO 3166-2:BW', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.SouthernAfrica, 2, 202, 18),
    Definition(74, 'Bouvet Island', Alpha2.BV, Alpha3.BVT, 'ISO 3166-2:BV', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(76, 'Brazil', Alpha2.BR, Alpha3.BRA, 'ISO 3166-2:BR', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(86, 'British Indian Ocean Territory', Alpha2.IO, Alpha3.IOT, 'ISO 3166-2:IO', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(96, 'Brunei Darussalam', Alpha2.BN, Alpha3.BRN, 'ISO 3166-2:BN', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(100, 'Bulgaria', Alpha2.BG, Alpha3.BGR, 'ISO 3166-2:BG', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(854, 'Burkina Faso', Alpha2.BF, Alpha3.BFA, 'ISO 3166-2:BF', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(108, 'Burundi', Alpha2.BI, Alpha3.BDI, 'ISO 3166-2:BI', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(132, 'Cabo Verde', Alpha2.CV, Alpha3.CPV, 'ISO 3166-2:CV', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(116, 'Cambodia', Alpha2.KH, Alpha3.KHM, 'ISO 3166-2:KH', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(120, 'Cameroon', Alpha2.CM, Alpha3.CMR, 'ISO 3166-2:CM', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(124, 'Canada', Alpha2.CA, Alpha3.CAN, 'ISO 3166-2:CA', Region.Americas, SubRegion.NorthernAmerica, IntermediateRegion.Undefined, 19, 21, None),
    Definition(136, 'Cayman Islands', Alpha2.KY, Alpha3.CYM, 'ISO 3166-2:KY', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(140, 'Central African Republic', Alpha2.CF, Alpha3.CAF, 'ISO 3166-2:CF', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(148, 'Chad', Alpha2.TD, Alpha3.TCD, 'ISO 3166-2:TD', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(152, 'Chile', Alpha2.CL, Alpha3.CHL, 'ISO 3166-2:CL', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(156, 'China', Alpha2.CN, Alpha3.CHN, 'ISO 3166-2:CN', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(162, 'Christmas Island', Alpha2.CX, Alpha3.CXR, 'ISO 3166-2:CX', Region.Oceania, SubRegion.AustraliaAndNewZealand, IntermediateRegion.Undefined, 9, 53, None),
    Definition(166, 'Cocos (Keeling) Islands', Alpha2.CC, Alpha3.CCK, 'ISO 3166-2:CC', Region.Oceania, SubRegion.AustraliaAndNewZealand, IntermediateRegion.Undefined, 9, 53, None),
    Definition(170, 'Colombia', Alpha2.CO, Alpha3.COL, 'ISO 3166-2:CO', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(174, 'Comoros', Alpha2.KM, Alpha3.COM, 'ISO 3166-2:KM', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(178, 'Congo', Alpha2.CG, Alpha3.COG, 'ISO 3166-2:CG', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(180, 'Congo, Democratic Republic of the', Alpha2.CD, Alpha3.COD, 'ISO 3166-2:CD', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(184, 'Cook Islands', Alpha2.CK, Alpha3.COK, 'ISO 3166-2:CK', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(188, 'Costa Rica', Alpha2.CR, Alpha3.CRI, 'ISO 3166-2:CR', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(384, "Côte d'Ivoire", Alpha2.CI, Alpha3.CIV, 'ISO 3166-2:CI', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(191, 'Croatia', Alpha2.HR, Alpha3.HRV, 'ISO 3166-2:HR', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(192, 'Cuba', Alpha2.CU, Alpha3.CUB, 'ISO 3166-2:CU', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(531, 'Curaçao', Alpha2.CW, Alpha3.CUW, 'ISO 3166-2:CW', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(196, 'Cyprus', Alpha2.CY, Alpha3.CYP, 'ISO 3166-2:CY', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(203, 'Czechia', Alpha2.CZ, Alpha3.CZE, 'ISO 3166-2:CZ', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(208, 'Denmark', Alpha2.DK, Alpha3.DNK, 'ISO 3166-2:DK', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(262, 'Djibouti', Alpha2.DJ, Alpha3.DJI, 'ISO 3166-2:DJ', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(212, 'Dominica', Alpha2.DM, Alpha3.DMA, 'ISO 3166-2:DM', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(214, 'Dominican Republic', Alpha2.DO, Alpha3.DOM, 'ISO 3166-2:DO', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(218, 'Ecuador', Alpha2.EC, Alpha3.ECU, 'ISO 3166-2:EC', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(818, 'Egypt', Alpha2.EG, Alpha3.EGY, 'ISO 3166-2:EG', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(222, 'El Salvador', Alpha2.SV, Alpha3.SLV, 'ISO 3166-2:SV', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(226, 'Equatorial Guinea', Alpha2.GQ, Alpha3.GNQ, 'ISO 3166-2:GQ', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(232, 'Eritrea', Alpha2.ER, Alpha3.ERI, 'ISO 3166-2:ER', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(233, 'Estonia', Alpha2.EE, Alpha3.EST, 'ISO 3166-2:EE', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(748, 'Eswatini', Alpha2.SZ, Alpha3.SWZ, 'ISO 3166-2:SZ', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.SouthernAfrica, 2, 202, 18),
    Definition(231, 'Ethiopia', Alpha2.ET, Alpha3.ETH, 'ISO 3166-2:ET', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(238, 'Falkland Islands (Malvinas)', Alpha2.FK, Alpha3.FLK, 'ISO 3166-2:FK', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(234, 'Faroe Islands', Alpha2.FO, Alpha3.FRO, 'ISO 3166-2:FO', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(242, 'Fiji', Alpha2.FJ, Alpha3.FJI, 'ISO 3166-2:FJ', Region.Oceania, SubRegion.Melanesia, IntermediateRegion.Undefined, 9, 54, None),
    Definition(246, 'Finland', Alpha2.FI, Alpha3.FIN, 'ISO 3166-2:FI', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(250, 'France', Alpha2.FR, Alpha3.FRA, 'ISO 3166-2:FR', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(254, 'French Guiana', Alpha2.GF, Alpha3.GUF, 'ISO 3166-2:GF', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(258, 'French Polynesia', Alpha2.PF, Alpha3.PYF, 'ISO 3166-2:PF', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(260, 'French Southern Territories', Alpha2.TF, Alpha3.ATF, 'ISO 3166-2:TF', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(266, 'Gabon', Alpha2.GA, Alpha3.GAB, 'ISO 3166-2:GA', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(270, 'Gambia', Alpha2.GM, Alpha3.GMB, 'ISO 3166-2:GM', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(268, 'Georgia', Alpha2.GE, Alpha3.GEO, 'ISO 3166-2:GE', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(276, 'Germany', Alpha2.DE, Alpha3.DEU, 'ISO 3166-2:DE', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(288, 'Ghana', Alpha2.GH, Alpha3.GHA, 'ISO 3166-2:GH', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(292, 'Gibraltar', Alpha2.GI, Alpha3.GIB, 'ISO 3166-2:GI', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(300, 'Greece', Alpha2.GR, Alpha3.GRC, 'ISO 3166-2:GR', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(304, 'Greenland', Alpha2.GL, Alpha3.GRL, 'ISO 3166-2:GL', Region.Americas, SubRegion.NorthernAmerica, IntermediateRegion.Undefined, 19, 21, None),
    Definition(308, 'Grenada', Alpha2.GD, Alpha3.GRD, 'ISO 3166-2:GD', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(312, 'Guadeloupe', Alpha2.GP, Alpha3.GLP, 'ISO 3166-2:GP', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(316, 'Guam', Alpha2.GU, Alpha3.GUM, 'ISO 3166-2:GU', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(320, 'Guatemala', Alpha2.GT, Alpha3.GTM, 'ISO 3166-2:GT', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(831, 'Guernsey', Alpha2.GG, Alpha3.GGY, 'ISO 3166-2:GG', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.ChannelIslands, 150, 154, 830),
    Definition(324, 'Guinea', Alpha2.GN, Alpha3.GIN, 'ISO 3166-2:GN', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(624, 'Guinea-Bissau', Alpha2.GW, Alpha3.GNB, 'ISO 3166-2:GW', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(328, 'Guyana', Alpha2.GY, Alpha3.GUY, 'ISO 3166-2:GY', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(332, 'Haiti', Alpha2.HT, Alpha3.HTI, 'ISO 3166-2:HT', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(334, 'Heard Island and McDonald Islands', Alpha2.HM, Alpha3.HMD, 'ISO 3166-2:HM', Region.Oceania, SubRegion.AustraliaAndNewZealand, IntermediateRegion.Undefined, 9, 53, None),
    Definition(336, 'Holy See', Alpha2.VA, Alpha3.VAT, 'ISO 3166-2:VA', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(340, 'Honduras', Alpha2.HN, Alpha3.HND, 'ISO 3166-2:HN', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(344, 'Hong Kong', Alpha2.HK, Alpha3.HKG, 'ISO 3166-2:HK', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(348, 'Hungary', Alpha2.HU, Alpha3.HUN, 'ISO 3166-2:HU', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(352, 'Iceland', Alpha2.IS, Alpha3.ISL, 'ISO 3166-2:IS', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(356, 'India', Alpha2.IN, Alpha3.IND, 'ISO 3166-2:IN', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(360, 'Indonesia', Alpha2.ID, Alpha3.IDN, 'ISO 3166-2:ID', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(364, 'Iran (Islamic Republic of)', Alpha2.IR, Alpha3.IRN, 'ISO 3166-2:IR', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(368, 'Iraq', Alpha2.IQ, Alpha3.IRQ, 'ISO 3166-2:IQ', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(372, 'Ireland', Alpha2.IE, Alpha3.IRL, 'ISO 3166-2:IE', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(833, 'Isle of Man', Alpha2.IM, Alpha3.IMN, 'ISO 3166-2:IM', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(376, 'Israel', Alpha2.IL, Alpha3.ISR, 'ISO 3166-2:IL', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(380, 'Italy', Alpha2.IT, Alpha3.ITA, 'ISO 3166-2:IT', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(388, 'Jamaica', Alpha2.JM, Alpha3.JAM, 'ISO 3166-2:JM', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(392, 'Japan', Alpha2.JP, Alpha3.JPN, 'ISO 3166-2:JP', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(832, 'Jersey', Alpha2.JE, Alpha3.JEY, 'ISO 3166-2:JE', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.ChannelIslands, 150, 154, 830),
    Definition(400, 'Jordan', Alpha2.JO, Alpha3.JOR, 'ISO 3166-2:JO', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(398, 'Kazakhstan', Alpha2.KZ, Alpha3.KAZ, 'ISO 3166-2:KZ', Region.Asia, SubRegion.CentralAsia, IntermediateRegion.Undefined, 142, 143, None),
    Definition(404, 'Kenya', Alpha2.KE, Alpha3.KEN, 'ISO 3166-2:KE', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(296, 'Kiribati', Alpha2.KI, Alpha3.KIR, 'ISO 3166-2:KI', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(408, "Korea (Democratic People's Republic of)", Alpha2.KP, Alpha3.PRK, 'ISO 3166-2:KP', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(410, 'Korea, Republic of', Alpha2.KR, Alpha3.KOR, 'ISO 3166-2:KR', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(414, 'Kuwait', Alpha2.KW, Alpha3.KWT, 'ISO 3166-2:KW', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(417, 'Kyrgyzstan', Alpha2.KG, Alpha3.KGZ, 'ISO 3166-2:KG', Region.Asia, SubRegion.CentralAsia, IntermediateRegion.Undefined, 142, 143, None),
    Definition(418, "Lao People's Democratic Republic", Alpha2.LA, Alpha3.LAO, 'ISO 3166-2:LA', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(428, 'Latvia', Alpha2.LV, Alpha3.LVA, 'ISO 3166-2:LV', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(422, 'Lebanon', Alpha2.LB, Alpha3.LBN, 'ISO 3166-2:LB', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(426, 'Lesotho', Alpha2.LS, Alpha3.LSO, 'ISO 3166-2:LS', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.SouthernAfrica, 2, 202, 18),
    Definition(430, 'Liberia', Alpha2.LR, Alpha3.LBR, 'ISO 3166-2:LR', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(434, 'Libya', Alpha2.LY, Alpha3.LBY, 'ISO 3166-2:LY', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(438, 'Liechtenstein', Alpha2.LI, Alpha3.LIE, 'ISO 3166-2:LI', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(440, 'Lithuania', Alpha2.LT, Alpha3.LTU, 'ISO 3166-2:LT', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(442, 'Luxembourg', Alpha2.LU, Alpha3.LUX, 'ISO 3166-2:LU', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(446, 'Macao', Alpha2.MO, Alpha3.MAC, 'ISO 3166-2:MO', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(450, 'Madagascar', Alpha2.MG, Alpha3.MDG, 'ISO 3166-2:MG', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(454, 'Malawi', Alpha2.MW, Alpha3.MWI, 'ISO 3166-2:MW', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(458, 'Malaysia', Alpha2.MY, Alpha3.MYS, 'ISO 3166-2:MY', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(462, 'Maldives', Alpha2.MV, Alpha3.MDV, 'ISO 3166-2:MV', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(466, 'Mali', Alpha2.ML, Alpha3.MLI, 'ISO 3166-2:ML', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(470, 'Malta', Alpha2.MT, Alpha3.MLT, 'ISO 3166-2:MT', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(584, 'Marshall Islands', Alpha2.MH, Alpha3.MHL, 'ISO 3166-2:MH', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(474, 'Martinique', Alpha2.MQ, Alpha3.MTQ, 'ISO 3166-2:MQ', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(478, 'Mauritania', Alpha2.MR, Alpha3.MRT, 'ISO 3166-2:MR', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(480, 'Mauritius', Alpha2.MU, Alpha3.MUS, 'ISO 3166-2:MU', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(175, 'Mayotte', Alpha2.YT, Alpha3.MYT, 'ISO 3166-2:YT', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(484, 'Mexico', Alpha2.MX, Alpha3.MEX, 'ISO 3166-2:MX', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(583, 'Micronesia (Federated States of)', Alpha2.FM, Alpha3.FSM, 'ISO 3166-2:FM', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(498, 'Moldova, Republic of', Alpha2.MD, Alpha3.MDA, 'ISO 3166-2:MD', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(492, 'Monaco', Alpha2.MC, Alpha3.MCO, 'ISO 3166-2:MC', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(496, 'Mongolia', Alpha2.MN, Alpha3.MNG, 'ISO 3166-2:MN', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(499, 'Montenegro', Alpha2.ME, Alpha3.MNE, 'ISO 3166-2:ME', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(500, 'Montserrat', Alpha2.MS, Alpha3.MSR, 'ISO 3166-2:MS', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(504, 'Morocco', Alpha2.MA, Alpha3.MAR, 'ISO 3166-2:MA', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(508, 'Mozambique', Alpha2.MZ, Alpha3.MOZ, 'ISO 3166-2:MZ', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(104, 'Myanmar', Alpha2.MM, Alpha3.MMR, 'ISO 3166-2:MM', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(516, 'Namibia', Alpha2.NA, Alpha3.NAM, 'ISO 3166-2:NA', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.SouthernAfrica, 2, 202, 18),
    Definition(520, 'Nauru', Alpha2.NR, Alpha3.NRU, 'ISO 3166-2:NR', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(524, 'Nepal', Alpha2.NP, Alpha3.NPL, 'ISO 3166-2:NP', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(528, 'Netherlands', Alpha2.NL, Alpha3.NLD, 'ISO 3166-2:NL', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(540, 'New Caledonia', Alpha2.NC, Alpha3.NCL, 'ISO 3166-2:NC', Region.Oceania, SubRegion.Melanesia, IntermediateRegion.Undefined, 9, 54, None),
    Definition(554, 'New Zealand', Alpha2.NZ, Alpha3.NZL, 'ISO 3166-2:NZ', Region.Oceania, SubRegion.AustraliaAndNewZealand, IntermediateRegion.Undefined, 9, 53, None),
    Definition(558, 'Nicaragua', Alpha2.NI, Alpha3.NIC, 'ISO 3166-2:NI', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(562, 'Niger', Alpha2.NE, Alpha3.NER, 'ISO 3166-2:NE', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(566, 'Nigeria', Alpha2.NG, Alpha3.NGA, 'ISO 3166-2:NG', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(570, 'Niue', Alpha2.NU, Alpha3.NIU, 'ISO 3166-2:NU', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(574, 'Norfolk Island', Alpha2.NF, Alpha3.NFK, 'ISO 3166-2:NF', Region.Oceania, SubRegion.AustraliaAndNewZealand, IntermediateRegion.Undefined, 9, 53, None),
    Definition(807, 'North Macedonia', Alpha2.MK, Alpha3.MKD, 'ISO 3166-2:MK', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(580, 'Northern Mariana Islands', Alpha2.MP, Alpha3.MNP, 'ISO 3166-2:MP', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(578, 'Norway', Alpha2.NO, Alpha3.NOR, 'ISO 3166-2:NO', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(512, 'Oman', Alpha2.OM, Alpha3.OMN, 'ISO 3166-2:OM', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(586, 'Pakistan', Alpha2.PK, Alpha3.PAK, 'ISO 3166-2:PK', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(585, 'Palau', Alpha2.PW, Alpha3.PLW, 'ISO 3166-2:PW', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(275, 'Palestine, State of', Alpha2.PS, Alpha3.PSE, 'ISO 3166-2:PS', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(591, 'Panama', Alpha2.PA, Alpha3.PAN, 'ISO 3166-2:PA', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.CentralAmerica, 19, 419, 13),
    Definition(598, 'Papua New Guinea', Alpha2.PG, Alpha3.PNG, 'ISO 3166-2:PG', Region.Oceania, SubRegion.Melanesia, IntermediateRegion.Undefined, 9, 54, None),
    Definition(600, 'Paraguay', Alpha2.PY, Alpha3.PRY, 'ISO 3166-2:PY', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(604, 'Peru', Alpha2.PE, Alpha3.PER, 'ISO 3166-2:PE', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(608, 'Philippines', Alpha2.PH, Alpha3.PHL, 'ISO 3166-2:PH', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(612, 'Pitcairn', Alpha2.PN, Alpha3.PCN, 'ISO 3166-2:PN', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(616, 'Poland', Alpha2.PL, Alpha3.POL, 'ISO 3166-2:PL', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(620, 'Portugal', Alpha2.PT, Alpha3.PRT, 'ISO 3166-2:PT', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(630, 'Puerto Rico', Alpha2.PR, Alpha3.PRI, 'ISO 3166-2:PR', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(634, 'Qatar', Alpha2.QA, Alpha3.QAT, 'ISO 3166-2:QA', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(638, 'Réunion', Alpha2.RE, Alpha3.REU, 'ISO 3166-2:RE', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(642, 'Romania', Alpha2.RO, Alpha3.ROU, 'ISO 3166-2:RO', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(643, 'Russian Federation', Alpha2.RU, Alpha3.RUS, 'ISO 3166-2:RU', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(646, 'Rwanda', Alpha2.RW, Alpha3.RWA, 'ISO 3166-2:RW', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(652, 'Saint Barthélemy', Alpha2.BL, Alpha3.BLM, 'ISO 3166-2:BL', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(654, 'Saint Helena, Ascension and Tristan da Cunha', Alpha2.SH, Alpha3.SHN, 'ISO 3166-2:SH', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(659, 'Saint Kitts and Nevis', Alpha2.KN, Alpha3.KNA, 'ISO 3166-2:KN', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(662, 'Saint Lucia', Alpha2.LC, Alpha3.LCA, 'ISO 3166-2:LC', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(663, 'Saint Martin (French part)', Alpha2.MF, Alpha3.MAF, 'ISO 3166-2:MF', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(666, 'Saint Pierre and Miquelon', Alpha2.PM, Alpha3.SPM, 'ISO 3166-2:PM', Region.Americas, SubRegion.NorthernAmerica, IntermediateRegion.Undefined, 19, 21, None),
    Definition(670, 'Saint Vincent and the Grenadines', Alpha2.VC, Alpha3.VCT, 'ISO 3166-2:VC', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(882, 'Samoa', Alpha2.WS, Alpha3.WSM, 'ISO 3166-2:WS', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(674, 'San Marino', Alpha2.SM, Alpha3.SMR, 'ISO 3166-2:SM', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(678, 'Sao Tome and Principe', Alpha2.ST, Alpha3.STP, 'ISO 3166-2:ST', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.MiddleAfrica, 2, 202, 17),
    Definition(682, 'Saudi Arabia', Alpha2.SA, Alpha3.SAU, 'ISO 3166-2:SA', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(686, 'Senegal', Alpha2.SN, Alpha3.SEN, 'ISO 3166-2:SN', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(688, 'Serbia', Alpha2.RS, Alpha3.SRB, 'ISO 3166-2:RS', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(690, 'Seychelles', Alpha2.SC, Alpha3.SYC, 'ISO 3166-2:SC', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(694, 'Sierra Leone', Alpha2.SL, Alpha3.SLE, 'ISO 3166-2:SL', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(702, 'Singapore', Alpha2.SG, Alpha3.SGP, 'ISO 3166-2:SG', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(534, 'Sint Maarten (Dutch part)', Alpha2.SX, Alpha3.SXM, 'ISO 3166-2:SX', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(703, 'Slovakia', Alpha2.SK, Alpha3.SVK, 'ISO 3166-2:SK', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(705, 'Slovenia', Alpha2.SI, Alpha3.SVN, 'ISO 3166-2:SI', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(90, 'Solomon Islands', Alpha2.SB, Alpha3.SLB, 'ISO 3166-2:SB', Region.Oceania, SubRegion.Melanesia, IntermediateRegion.Undefined, 9, 54, None),
    Definition(706, 'Somalia', Alpha2.SO, Alpha3.SOM, 'ISO 3166-2:SO', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(710, 'South Africa', Alpha2.ZA, Alpha3.ZAF, 'ISO 3166-2:ZA', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.SouthernAfrica, 2, 202, 18),
    Definition(239, 'South Georgia and the South Sandwich Islands', Alpha2.GS, Alpha3.SGS, 'ISO 3166-2:GS', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(728, 'South Sudan', Alpha2.SS, Alpha3.SSD, 'ISO 3166-2:SS', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(724, 'Spain', Alpha2.ES, Alpha3.ESP, 'ISO 3166-2:ES', Region.Europe, SubRegion.SouthernEurope, IntermediateRegion.Undefined, 150, 39, None),
    Definition(144, 'Sri Lanka', Alpha2.LK, Alpha3.LKA, 'ISO 3166-2:LK', Region.Asia, SubRegion.SouthernAsia, IntermediateRegion.Undefined, 142, 34, None),
    Definition(729, 'Sudan', Alpha2.SD, Alpha3.SDN, 'ISO 3166-2:SD', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(740, 'Suriname', Alpha2.SR, Alpha3.SUR, 'ISO 3166-2:SR', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(744, 'Svalbard and Jan Mayen', Alpha2.SJ, Alpha3.SJM, 'ISO 3166-2:SJ', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(752, 'Sweden', Alpha2.SE, Alpha3.SWE, 'ISO 3166-2:SE', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(756, 'Switzerland', Alpha2.CH, Alpha3.CHE, 'ISO 3166-2:CH', Region.Europe, SubRegion.WesternEurope, IntermediateRegion.Undefined, 150, 155, None),
    Definition(760, 'Syrian Arab Republic', Alpha2.SY, Alpha3.SYR, 'ISO 3166-2:SY', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(158, 'Taiwan, Province of China', Alpha2.TW, Alpha3.TWN, 'ISO 3166-2:TW', Region.Asia, SubRegion.EasternAsia, IntermediateRegion.Undefined, 142, 30, None),
    Definition(762, 'Tajikistan', Alpha2.TJ, Alpha3.TJK, 'ISO 3166-2:TJ', Region.Asia, SubRegion.CentralAsia, IntermediateRegion.Undefined, 142, 143, None),
    Definition(834, 'Tanzania, United Republic of', Alpha2.TZ, Alpha3.TZA, 'ISO 3166-2:TZ', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(764, 'Thailand', Alpha2.TH, Alpha3.THA, 'ISO 3166-2:TH', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(626, 'Timor-Leste', Alpha2.TL, Alpha3.TLS, 'ISO 3166-2:TL', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(768, 'Togo', Alpha2.TG, Alpha3.TGO, 'ISO 3166-2:TG', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.WesternAfrica, 2, 202, 11),
    Definition(772, 'Tokelau', Alpha2.TK, Alpha3.TKL, 'ISO 3166-2:TK', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(776, 'Tonga', Alpha2.TO, Alpha3.TON, 'ISO 3166-2:TO', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(780, 'Trinidad and Tobago', Alpha2.TT, Alpha3.TTO, 'ISO 3166-2:TT', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(788, 'Tunisia', Alpha2.TN, Alpha3.TUN, 'ISO 3166-2:TN', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(792, 'Türkiye', Alpha2.TR, Alpha3.TUR, 'ISO 3166-2:TR', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(795, 'Turkmenistan', Alpha2.TM, Alpha3.TKM, 'ISO 3166-2:TM', Region.Asia, SubRegion.CentralAsia, IntermediateRegion.Undefined, 142, 143, None),
    Definition(796, 'Turks and Caicos Islands', Alpha2.TC, Alpha3.TCA, 'ISO 3166-2:TC', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(798, 'Tuvalu', Alpha2.TV, Alpha3.TUV, 'ISO 3166-2:TV', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(800, 'Uganda', Alpha2.UG, Alpha3.UGA, 'ISO 3166-2:UG', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(804, 'Ukraine', Alpha2.UA, Alpha3.UKR, 'ISO 3166-2:UA', Region.Europe, SubRegion.EasternEurope, IntermediateRegion.Undefined, 150, 151, None),
    Definition(784, 'United Arab Emirates', Alpha2.AE, Alpha3.ARE, 'ISO 3166-2:AE', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(826, 'United Kingdom of Great Britain and Northern Ireland', Alpha2.GB, Alpha3.GBR, 'ISO 3166-2:GB', Region.Europe, SubRegion.NorthernEurope, IntermediateRegion.Undefined, 150, 154, None),
    Definition(840, 'United States of America', Alpha2.US, Alpha3.USA, 'ISO 3166-2:US', Region.Americas, SubRegion.NorthernAmerica, IntermediateRegion.Undefined, 19, 21, None),
    Definition(581, 'United States Minor Outlying Islands', Alpha2.UM, Alpha3.UMI, 'ISO 3166-2:UM', Region.Oceania, SubRegion.Micronesia, IntermediateRegion.Undefined, 9, 57, None),
    Definition(858, 'Uruguay', Alpha2.UY, Alpha3.URY, 'ISO 3166-2:UY', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(860, 'Uzbekistan', Alpha2.UZ, Alpha3.UZB, 'ISO 3166-2:UZ', Region.Asia, SubRegion.CentralAsia, IntermediateRegion.Undefined, 142, 143, None),
    Definition(548, 'Vanuatu', Alpha2.VU, Alpha3.VUT, 'ISO 3166-2:VU', Region.Oceania, SubRegion.Melanesia, IntermediateRegion.Undefined, 9, 54, None),
    Definition(862, 'Venezuela (Bolivarian Republic of)', Alpha2.VE, Alpha3.VEN, 'ISO 3166-2:VE', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.SouthAmerica, 19, 419, 5),
    Definition(704, 'Viet Nam', Alpha2.VN, Alpha3.VNM, 'ISO 3166-2:VN', Region.Asia, SubRegion.SouthEasternAsia, IntermediateRegion.Undefined, 142, 35, None),
    Definition(92, 'Virgin Islands (British)', Alpha2.VG, Alpha3.VGB, 'ISO 3166-2:VG', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(850, 'Virgin Islands (U.S.)', Alpha2.VI, Alpha3.VIR, 'ISO 3166-2:VI', Region.Americas, SubRegion.LatinAmericaAndTheCaribbean, IntermediateRegion.Caribbean, 19, 419, 29),
    Definition(876, 'Wallis and Futuna', Alpha2.WF, Alpha3.WLF, 'ISO 3166-2:WF', Region.Oceania, SubRegion.Polynesia, IntermediateRegion.Undefined, 9, 61, None),
    Definition(732, 'Western Sahara', Alpha2.EH, Alpha3.ESH, 'ISO 3166-2:EH', Region.Africa, SubRegion.NorthernAfrica, IntermediateRegion.Undefined, 2, 15, None),
    Definition(887, 'Yemen', Alpha2.YE, Alpha3.YEM, 'ISO 3166-2:YE', Region.Asia, SubRegion.WesternAsia, IntermediateRegion.Undefined, 142, 145, None),
    Definition(894, 'Zambia', Alpha2.ZM, Alpha3.ZMB, 'ISO 3166-2:ZM', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
    Definition(716, 'Zimbabwe', Alpha2.ZW, Alpha3.ZWE, 'ISO 3166-2:ZW', Region.Africa, SubRegion.SubSaharanAfrica, IntermediateRegion.EasternAfrica, 2, 202, 14),
)

ALPHA2_INDEX: dict[Alpha2, int] = {
    Alpha2.AF: 4,
    Alpha2.AX: 248,
    Alpha2.AL: 8,
    Alpha2.DZ: 12,
    Alpha2.AS: 16,
    Alpha2.AD: 20,
    Alpha2.AO: 24,
    Alpha2.AI: 660,
    Alpha2.AQ: 10,
    Alpha2.AG: 28,
    Alpha2.AR: 32,
    Alpha2.AM: 51,
    Alpha2.AW: 533,
    Alpha2.AU: 36,
    Alpha2.AT: 40,
    Alpha2.AZ: 31,
    Alpha2.BS: 44,
    Alpha2.BH: 48,
    Alpha2.BD: 50,
    Alpha2.BB: 52,
    Alpha2.BY: 112,
    Alpha2.BE: 56,
    Alpha2.BZ: 84,
    Alpha2.BJ: 204,
    Alpha2.BM: 60,
    Alpha2.BT: 64,
    Alpha2.BO: 68,
    Alpha2.BQ: 535,
    Alpha2.BA: 70,
    Alpha2.BW: 72,
    Alpha2.BV: 74,
    Alpha2.BR: 76,
    Alpha2.IO: 86,
    Alpha2.BN: 96,
    Alpha2.BG: 100,
    Alpha2.BF: 854,
    Alpha2.BI: 108,
    Alpha2.CV: 132,
    Alpha2.KH: 116,
    Alpha2.CM: 120,
    Alpha2.CA: 124,
    Alpha2.KY: 136,
    Alpha2.CF: 140,
    Alpha2.TD: 148,
    Alpha2.CL: 152,
    Alpha2.CN: 156,
    Alpha2.CX: 162,
    Alpha2.CC: 166,
    Alpha2.CO: 170,
    Alpha2.KM: 174,
    Alpha2.CG: 178,
    Alpha2.CD: 180,
    Alpha2.CK: 184,
    Alpha2.CR: 188,
    Alpha2.CI: 384,
    Alpha2.HR: 191,
    Alpha2.CU: 192,
    Alpha2.CW: 531,
    Alpha2.CY: 196,
    Alpha2.CZ: 203,
    Alpha2.DK: 208,
    Alpha2.DJ: 262,
    Alpha2.DM: 212,
    Alpha2.DO: 214,
    Alpha2.EC: 218,
    Alpha2.EG: 818,
    Alpha2.SV: 222,
    Alpha2.GQ: 226,
    Alpha2.ER: 232,
    Alpha2.EE: 233,
    Alpha2.SZ: 748,
    Alpha2.ET: 231,
    Alpha2.FK: 238,
    Alpha2.FO: 234,
    Alpha2.FJ: 242,
    Alpha2.FI: 246,
    Alpha2.FR: 250,
    Alpha2.GF: 254,
    Alpha2.PF: 258,
    Alpha2.TF: 260,
    Alpha2.GA: 266,
    Alpha2.GM: 270,
    Alpha2.GE: 268,
    Alpha2.DE: 276,
    Alpha2.GH: 288,
    Alpha2.GI: 292,
    Alpha2.GR: 300,
    Alpha2.GL: 304,
    Alpha2.GD: 308,
    Alpha2.GP: 312,
    Alpha2.GU: 316,
    Alpha2.GT: 320,
    Alpha2.GG: 831,
    Alpha2.GN: 324,
    Alpha2.GW: 624,
    Alpha2.GY: 328,
    Alpha2.HT: 332,
    Alpha2.HM: 334,
    Alpha2.VA: 336,
    Alpha2.HN: 340,
    Alpha2.HK: 344,
    Alpha2.HU: 348,
    Alpha2.IS: 352,
    Alpha2.IN: 356,
    Alpha2.ID: 360,
    Alpha2.IR: 364,
    Alpha2.IQ: 368,
    Alpha2.IE: 372,
    Alpha2.IM: 833,
    Alpha2.IL: 376,
    Alpha2.IT: 380,
    Alpha2.JM: 388,
    Alpha2.JP: 392,
    Alpha2.JE: 832,
    Alpha2.JO: 400,
    Alpha2.KZ: 398,
    Alpha2.KE: 404,
    Alpha2.KI: 296,
    Alpha2.KP: 408,
    Alpha2.KR: 410,
    Alpha2.KW: 414,
    Alpha2.KG: 417,
    Alpha2.LA: 418,
    Alpha2.LV: 428,
    Alpha2.LB: 422,
    Alpha2.LS: 426,
    Alpha2.LR: 430,
    Alpha2.LY: 434,
    Alpha2.LI: 438,
    Alpha2.LT: 440,
    Alpha2.LU: 442,
    Alpha2.MO: 446,
    Alpha2.MG: 450,
    Alpha2.MW: 454,
    Alpha2.MY: 458,
    Alpha2.MV: 462,
    Alpha2.ML: 466,
    Alpha2.MT: 470,
    Alpha2.MH: 584,
    Alpha2.MQ: 474,
    Alpha2.MR: 478,
    Alpha2.MU: 480,
    Alpha2.YT: 175,
    Alpha2.MX: 484,
    Alpha2.FM: 583,
    Alpha2.MD: 498,
    Alpha2.MC: 492,
    Alpha2.MN: 496,
    Alpha2.ME: 499,
    Alpha2.MS: 500,
    Alpha2.MA: 504,
    Alpha2.MZ: 508,
    Alpha2.MM: 104,
    Alpha2.NA: 516,
    Alpha2.NR: 520,
    Alpha2.NP: 524,
    Alpha2.NL: 528,
    Alpha2.NC: 540,
    Alpha2.NZ: 554,
    Alpha2.NI: 558,
    Alpha2.NE: 562,
    Alpha2.NG: 566,
    Alpha2.NU: 570,
    Alpha2.NF: 574,
    Alpha2.MK: 807,
    Alpha2.MP: 580,
    Alpha2.NO: 578,
    Alpha2.OM: 512,
    Alpha2.PK: 586,
    Alpha2.PW: 585,
    Alpha2.PS: 275,
    Alpha2.PA: 591,
    Alpha2.PG: 598,
    Alpha2.PY: 600,
    Alpha2.PE: 604,
    Alpha2.PH: 608,
    Alpha2.PN: 612,
    Alpha2.PL: 616,
    Alpha2.PT: 620,
    Alpha2.PR: 630,
    Alpha2.QA: 634,
    Alpha2.RE: 638,
    Alpha2.RO: 642,
    Alpha2.RU: 643,
    Alpha2.RW: 646,
    Alpha2.BL: 652,
    Alpha2.SH: 654,
    Alpha2.KN: 659,
    Alpha2.LC: 662,
    Alpha2.MF: 663,
    Alpha2.PM: 666,
    Alpha2.VC: 670,
    Alpha2.WS: 882,
    Alpha2.SM: 674,
    Alpha2.ST: 678,
    Alpha2.SA: 682,
    Alpha2.SN: 686,
    Alpha2.RS: 688,
    Alpha2.SC: 690,
    Alpha2.SL: 694,
    Alpha2.SG: 702,
    Alpha2.SX: 534,
    Alpha2.SK: 703,
    Alpha2.SI: 705,
    Alpha2.SB: 90,
    Alpha2.SO: 706,
    Alpha2.ZA: 710,
    Alpha2.GS: 239,
    Alpha2.SS: 728,
    Alpha2.ES: 724,
    Alpha2.LK: 144,
    Alpha2.SD: 729,
    Alpha2.SR: 740,
    Alpha2.SJ: 744,
    Alpha2.SE: 752,
    Alpha2.CH: 756,
    Alpha2.SY: 760,
    Alpha2.TW: 158,
    Alpha2.TJ: 762,
    Alpha2.TZ: 834,
    Alpha2.TH: 764,
    Alpha2.TL: 626,
    Alpha2.TG: 768,
    Alpha2.TK: 772,
    Alpha2.TO: 776,
    Alpha2.TT: 780,
    Alpha2.TN: 788,
    Alpha2.TR: 792,
    Alpha2.TM: 795,
    Alpha2.TC: 796,
    Alpha2.TV: 798,
    Alpha2.UG: 800,
    Alpha2.UA: 804,
    Alpha2.AE: 784,
    Alpha2.GB: 826,
    Alpha2.US: 840,
    Alpha2.UM: 581,
    Alpha2.UY: 858,
    Alpha2.UZ: 860,
    Alpha2.VU: 548,
    Alpha2.VE: 862,
    Alpha2.VN: 704,
    Alpha2.VG: 92,
    Alpha2.VI: 850,
    Alpha2.WF: 876,
    Alpha2.EH: 732,
    Alpha2.YE: 887,
    Alpha2.ZM: 894,
    Alpha2.ZW: 716,
}

ALPHA3_INDEX: dict[Alpha3, int] = {
    Alpha3.AFG: 4,
    Alpha3.ALA: 248,
    Alpha3.ALB: 8,
    Alpha3.DZA: 12,
    Alpha3.ASM: 16,
    Alpha3.AND: 20,
    Alpha3.AGO: 24,
    Alpha3.AIA: 660,
    Alpha3.ATA: 10,
    Alpha3.ATG: 28,
    Alpha3.ARG: 32,
    Alpha3.ARM: 51,
    Alpha3.ABW: 533,
    Alpha3.AUS: 36,
    Alpha3.AUT: 40,
    Alpha3.AZE: 31,
    Alpha3.BHS: 44,
    Alpha3.BHR: 48,
    Alpha3.BGD: 50,
    Alpha3.BRB: 52,
    Alpha3.BLR: 112,
    Alpha3.BEL: 56,
    Alpha3.BLZ: 84,
    Alpha3.BEN: 204,
    Alpha3.BMU: 60,
    Alpha3.BTN: 64,
    Alpha3.BOL: 68,
    Alpha3.BES: 535,
    Alpha3.BIH: 70,
    Alpha3.BWA: 72,
    Alpha3.BVT: 74,
    Alpha3.BRA: 76,
    Alpha3.IOT: 86,
    Alpha3.BRN: 96,
    Alpha3.BGR: 100,
    Alpha3.BFA: 854,
    Alpha3.BDI: 108,
    Alpha3.CPV: 132,
    Alpha3.KHM: 116,
    Alpha3.CMR: 120,
    Alpha3.CAN: 124,
    Alpha3.CYM: 136,
    Alpha3.CAF: 140,
    Alpha3.TCD: 148,
    Alpha3.CHL: 152,
    Alpha3.CHN: 156,
    Alpha3.CXR: 162,
    Alpha3.CCK: 166,
    Alpha3.COL: 170,
    Alpha3.COM: 174,
    Alpha3.COG: 178,
    Alpha3.COD: 180,
    Alpha3.COK: 184,
    Alpha3.CRI: 188,
    Alpha3.CIV: 384,
    Alpha3.HRV: 191,
    Alpha3.CUB: 192,
    Alpha3.CUW: 531,
    Alpha3.CYP: 196,
    Alpha3.CZE: 203,
    Alpha3.DNK: 208,
    Alpha3.DJI: 262,
    Alpha3.DMA: 212,
    Alpha3.DOM: 214,
    Alpha3.ECU: 218,
    Alpha3.EGY: 818,
    Alpha3.SLV: 222,
    Alpha3.GNQ: 226,
    Alpha3.ERI: 232,
    Alpha3.EST: 233,
    Alpha3.SWZ: 748,
    Alpha3.ETH: 231,
    Alpha3.FLK: 238,
    Alpha3.FRO: 234,
    Alpha3.FJI: 242,
    Alpha3.FIN: 246,
    Alpha3.FRA: 250,
    Alpha3.GUF: 254,
    Alpha3.PYF: 258,
    Alpha3.ATF: 260,
    Alpha3.GAB: 266,
    Alpha3.GMB: 270,
    Alpha3.GEO: 268,
    Alpha3.DEU: 276,
    Alpha3.GHA: 288,
    Alpha3.GIB: 292,
    Alpha3.GRC: 300,
    Alpha3.GRL: 304,
    Alpha3.GRD: 308,
    Alpha3.GLP: 312,
    Alpha3.GUM: 316,
    Alpha3.GTM: 320,
    Alpha3.GGY: 831,
    Alpha3.GIN: 324,
    Alpha3.GNB: 624,
    Alpha3.GUY: 328,
    Alpha3.HTI: 332,
    Alpha3.HMD: 334,
    Alpha3.VAT: 336,
    Alpha3.HND: 340,
    Alpha3.HKG: 344,
    Alpha3.HUN: 348,
    Alpha3.ISL: 352,
    Alpha3.IND: 356,
    Alpha3.IDN: 360,
    Alpha3.IRN: 364,
    Alpha3.IRQ: 368,
    Alpha3.IRL: 372,
    Alpha3.IMN: 833,
    Alpha3.ISR: 376,
    Alpha3.ITA: 380,
    Alpha3.JAM: 388,
    Alpha3.JPN: 392,
    Alpha3.JEY: 832,
    Alpha3.JOR: 400,
    Alpha3.KAZ: 398,
    Alpha3.KEN: 404,
    Alpha3.KIR: 296,
    Alpha3.PRK: 408,
    Alpha3.KOR: 410,
    Alpha3.KWT: 414,
    Alpha3.KGZ: 417,
    Alpha3.LAO: 418,
    Alpha3.LVA: 428,
    Alpha3.LBN: 422,
    Alpha3.LSO: 426,
    Alpha3.LBR: 430,
    Alpha3.LBY: 434,
    Alpha3.LIE: 438,
    Alpha3.LTU: 440,
    Alpha3.LUX: 442,
    Alpha3.MAC: 446,
    Alpha3.MDG: 450,
    Alpha3.MWI: 454,
    Alpha3.MYS: 458,
    Alpha3.MDV: 462,
    Alpha3.MLI: 466,
    Alpha3.MLT: 470,
    Alpha3.MHL: 584,
    Alpha3.MTQ: 474,
    Alpha3.MRT: 478,
    Alpha3.MUS: 480,
    Alpha3.MYT: 175,
    Alpha3.MEX: 484,
    Alpha3.FSM: 583,
    Alpha3.MDA: 498,
    Alpha3.MCO: 492,
    Alpha3.MNG: 496,
    Alpha3.MNE: 499,
    Alpha3.MSR: 500,
    Alpha3.MAR: 504,
    Alpha3.MOZ: 508,
    Alpha3.MMR: 104,
    Alpha3.NAM: 516,
    Alpha3.NRU: 520,
    Alpha3.NPL: 524,
    Alpha3.NLD: 528,
    Alpha3.NCL: 540,
    Alpha3.NZL: 554,
    Alpha3.NIC: 558,
    Alpha3.NER: 562,
    Alpha3.NGA: 566,
    Alpha3.NIU: 570,
    Alpha3.NFK: 574,
    Alpha3.MKD: 807,
    Alpha3.MNP: 580,
    Alpha3.NOR: 578,
    Alpha3.OMN: 512,
    Alpha3.PAK: 586,
    Alpha3.PLW: 585,
    Alpha3.PSE: 275,
    Alpha3.PAN: 591,
    Alpha3.PNG: 598,
    Alpha3.PRY: 600,
    Alpha3.PER: 604,
    Alpha3.PHL: 608,
    Alpha3.PCN: 612,
    Alpha3.POL: 616,
    Alpha3.PRT: 620,
    Alpha3.PRI: 630,
    Alpha3.QAT: 634,
    Alpha3.REU: 638,
    Alpha3.ROU: 642,
    Alpha3.RUS: 643,
    Alpha3.RWA: 646,
    Alpha3.BLM: 652,
    Alpha3.SHN: 654,
    Alpha3.KNA: 659,
    Alpha3.LCA: 662,
    Alpha3.MAF: 663,
    Alpha3.SPM: 666,
    Alpha3.VCT: 670,
    Alpha3.WSM: 882,
    Alpha3.SMR: 674,
    Alpha3.STP: 678,
    Alpha3.SAU: 682,
    Alpha3.SEN: 686,
    Alpha3.SRB: 688,
    Alpha3.SYC: 690,
    Alpha3.SLE: 694,
    Alpha3.SGP: 702,
    Alpha3.SXM: 534,
    Alpha3.SVK: 703,
    Alpha3.SVN: 705,
    Alpha3.SLB: 90,
    Alpha3.SOM: 706,
    Alpha3.ZAF: 710,
    Alpha3.SGS: 239,
    Alpha3.SSD: 728,
    Alpha3.ESP: 724,
    Alpha3.LKA: 144,
    Alpha3.SDN: 729,
    Alpha3.SUR: 740,
    Alpha3.SJM: 744,
    Alpha3.SWE: 752,
    Alpha3.CHE: 756,
    Alpha3.SYR: 760,
    Alpha3.TWN: 158,
    Alpha3.TJK: 762,
    Alpha3.TZA: 834,
    Alpha3.THA: 764,
    Alpha3.TLS: 626,
    Alpha3.TGO: 768,
    Alpha3.TKL: 772,
    Alpha3.TON: 776,
    Alpha3.TTO: 780,
    Alpha3.TUN: 788,
    Alpha3.TUR: 792,
    Alpha3.TKM: 795,
    Alpha3.TCA: 796,
    Alpha3.TUV: 798,
    Alpha3.UGA: 800,
    Alpha3.UKR: 804,
    Alpha3.ARE: 784,
    Alpha3.GBR: 826,
    Alpha3.USA: 840,
    Alpha3.UMI: 581,
    Alpha3.URY: 858,
    Alpha3.UZB: 860,
    Alpha3.VUT: 548,
    Alpha3.VEN: 862,
    Alpha3.VNM: 704,
    Alpha3.VGB: 92,
    Alpha3.VIR: 850,
    Alpha3.WLF: 876,
    Alpha3.ESH: 732,
    Alpha3.YEM: 887,
    Alpha3.ZMB: 894,
    Alpha3.ZWE: 716,
}

REGION_INDEX: dict[Region, tuple[int, ...]] = {
    Region.Asia: (4, 51, 31, 48, 50, 64, 96, 116, 156, 196, 268, 344, 356, 360, 364, 368, 376, 392, 400, 398, 408, 410, 414, 417, 418, 422, 446, 458, 462, 496, 104, 524, 512, 586, 275, 608, 634, 682, 702, 144, 760, 158, 762, 764, 626, 792, 795, 784, 860, 704, 887),
    Region.Europe: (248, 8, 20, 40, 112, 56, 70, 100, 191, 203, 208, 233, 234, 246, 250, 276, 292, 300, 831, 336, 348, 352, 372, 833, 380, 832, 428, 438, 440, 442, 470, 498, 492, 499, 528, 807, 578, 616, 620, 642, 643, 674, 688, 703, 705, 724, 744, 752, 756, 804, 826),
    Region.Africa: (12, 24, 204, 72, 86, 854, 108, 132, 120, 140, 148, 174, 178, 180, 384, 262, 818, 226, 232, 748, 231, 260, 266, 270, 288, 324, 624, 404, 426, 430, 434, 450, 454, 466, 478, 480, 175, 504, 508, 516, 562, 566, 638, 646, 654, 678, 686, 690, 694, 706, 710, 728, 729, 834, 768, 788, 800, 732, 894, 716),
    Region.Oceania: (16, 36, 162, 166, 184, 242, 258, 316, 334, 296, 584, 583, 520, 540, 554, 570, 574, 580, 585, 598, 612, 882, 90, 772, 776, 798, 581, 548, 876),
    Region.Americas: (660, 28, 32, 533, 44, 52, 84, 60, 68, 535, 74, 76, 124, 136, 152, 170, 188, 192, 531, 212, 214, 218, 222, 238, 254, 304, 308, 312, 320, 328, 332, 340, 388, 474, 484, 500, 558, 591, 600, 604, 630, 652, 659, 662, 663, 666, 670, 534, 239, 740, 780, 796, 840, 858, 862, 92, 850),
    Region.Undefined: (10,),
}

SUB_REGION_INDEX: dict[SubRegion, tuple[int, ...]] = {
    SubRegion.SouthernAsia: (4, 50, 64, 356, 364, 462, 524, 586, 144),
    SubRegion.NorthernEurope: (248, 208, 233, 234, 246, 831, 352, 372, 833, 832, 428, 440, 578, 744, 752, 826),
    SubRegion.SouthernEurope: (8, 20, 70, 191, 292, 300, 336, 380, 470, 499, 807, 620, 674, 688, 705, 724),
    SubRegion.NorthernAfrica: (12, 818, 434, 504, 729, 788, 732),
    SubRegion.Polynesia: (16, 184, 258, 570, 612, 882, 772, 776, 798, 876),
    SubRegion.SubSaharanAfrica: (24, 204, 72, 86, 854, 108, 132, 120, 140, 148, 174, 178, 180, 384, 262, 226, 232, 748, 231, 260, 266, 270, 288, 324, 624, 404, 426, 430, 450, 454, 466, 478, 480, 175, 508, 516, 562, 566, 638, 646, 654, 678, 686, 690, 694, 706, 710, 728, 834, 768, 800, 894, 716),
    SubRegion.LatinAmericaAndTheCaribbean: (660, 28, 32, 533, 44, 52, 84, 68, 535, 74, 76, 136, 152, 170, 188, 192, 531, 212, 214, 218, 222, 238, 254, 308, 312, 320, 328, 332, 340, 388, 474, 484, 500, 558, 591, 600, 604, 630, 652, 659, 662, 663, 670, 534, 239, 740, 780, 796, 858, 862, 92, 850),
    SubRegion.WesternAsia: (51, 31, 48, 196, 268, 368, 376, 400, 414, 422, 512, 275, 634, 682, 760, 792, 784, 887),
    SubRegion.AustraliaAndNewZealand: (36, 162, 166, 334, 554, 574),
    SubRegion.WesternEurope: (40, 56, 250, 276, 438, 442, 492, 528, 756),
    SubRegion.EasternEurope: (112, 100, 203, 348, 498, 616, 642, 643, 703, 804),
    SubRegion.NorthernAmerica: (60, 124, 304, 666, 840),
    SubRegion.SouthEasternAsia: (96, 116, 360, 418, 458, 104, 608, 702, 764, 626, 704),
    SubRegion.EasternAsia: (156, 344, 392, 408, 410, 446, 496, 158),
    SubRegion.Melanesia: (242, 540, 598, 90, 548),
    SubRegion.Micronesia: (316, 296, 584, 583, 520, 580, 585, 581),
    SubRegion.CentralAsia: (398, 417, 762, 795, 860),
    SubRegion.Undefined: (10,),
}

INTERMEDIATE_REGION_INDEX: dict[IntermediateRegion, tuple[int, ...]] = {
    IntermediateRegion.MiddleAfrica: (24, 120, 140, 148, 178, 180, 226, 266, 678),
    IntermediateRegion.Caribbean: (660, 28, 533, 44, 52, 535, 136, 192, 531, 212, 214, 308, 312, 332, 388, 474, 500, 630, 652, 659, 662, 663, 670, 534, 780, 796, 92, 850),
    IntermediateRegion.SouthAmerica: (32, 68, 74, 76, 152, 170, 218, 238, 254, 328, 600, 604, 239, 740, 858, 862),
    IntermediateRegion.CentralAmerica: (84, 188, 222, 320, 340, 484, 558, 591),
    IntermediateRegion.WesternAfrica: (204, 854, 132, 384, 270, 288, 324, 624, 430, 466, 478, 562, 566, 654, 686, 694, 768),
    IntermediateRegion.SouthernAfrica: (72, 748, 426, 516, 710),
    IntermediateRegion.EasternAfrica: (86, 108, 174, 262, 232, 231, 260, 404, 450, 454, 480, 175, 508, 638, 646, 690, 706, 728, 834, 800, 894, 716),
    IntermediateRegion.ChannelIslands: (831, 832),
    IntermediateRegion.Undefined: (4, 248, 8, 12, 16, 20, 10, 51, 36, 40, 31, 48, 50, 112, 56, 60, 64, 70, 96, 100, 116, 124, 156, 162, 166, 184, 191, 196, 203, 208, 818, 233, 234, 242, 246, 250, 258, 268, 276, 292, 300, 304, 316, 334, 336, 344, 348, 352, 356, 360, 364, 368, 372, 833, 376, 380, 392, 400, 398, 296, 408, 410, 414, 417, 418, 428, 422, 434, 438, 440, 442, 446, 458, 462, 470, 584, 583, 498, 492, 496, 499, 504, 104, 520, 524, 528, 540, 554, 570, 574, 807, 580, 578, 512, 586, 585, 275, 598, 608, 612, 616, 620, 634, 642, 643, 666, 882, 674, 682, 688, 702, 703, 705, 90, 724, 144, 729, 744, 752, 756, 760, 158, 762, 764, 626, 772, 776, 788, 792, 795, 798, 804, 784, 826, 840, 581, 860, 548, 704, 876, 732, 887),
}
