# src/fixer/domain/currency.py
"""
Currency Codes - ISO 4217 Currency Value Types

This module defines the Currency value type, the Currencies sequence used for
symbol filtering, and constants for the currency codes published by the
European Central Bank and served by the rates API.

Files that USE this module:
- fixer.domain.models (Rates are keyed by Currency)
- fixer.adapters.providers.options (base and symbols query builders)
- fixer.app (command-line converter)
- tests.test_models (unit tests)

Files that this module USES:
- None (pure domain layer)
"""
from __future__ import annotations

from typing import Iterable, NewType

Currency = NewType("Currency", str)


class Currencies(tuple):
    """
    Ordered sequence of Currency codes.

    str() joins the codes with commas in sorted order, which is the format
    the API expects for the symbols filter. Duplicates are kept as given.
    """

    def __new__(cls, currencies: Iterable[Currency] = ()) -> "Currencies":
        return super().__new__(cls, (Currency(str(c)) for c in (currencies or ())))

    def __str__(self) -> str:
        return ",".join(sorted(self))

    def __repr__(self) -> str:
        return f"Currencies({list(self)!r})"


AED = Currency("AED")
AFN = Currency("AFN")
ALL = Currency("ALL")
AMD = Currency("AMD")
ANG = Currency("ANG")
AOA = Currency("AOA")
ARS = Currency("ARS")
AUD = Currency("AUD")
AWG = Currency("AWG")
AZN = Currency("AZN")
BAM = Currency("BAM")
BBD = Currency("BBD")
BDT = Currency("BDT")
BGN = Currency("BGN")
BHD = Currency("BHD")
BIF = Currency("BIF")
BMD = Currency("BMD")
BND = Currency("BND")
BOB = Currency("BOB")
BRL = Currency("BRL")
BSD = Currency("BSD")
BTC = Currency("BTC")
BTN = Currency("BTN")
BWP = Currency("BWP")
BYN = Currency("BYN")
BYR = Currency("BYR")
BZD = Currency("BZD")
CAD = Currency("CAD")
CDF = Currency("CDF")
CHF = Currency("CHF")
CLF = Currency("CLF")
CLP = Currency("CLP")
CNY = Currency("CNY")
COP = Currency("COP")
CRC = Currency("CRC")
CUC = Currency("CUC")
CUP = Currency("CUP")
CVE = Currency("CVE")
CZK = Currency("CZK")
DJF = Currency("DJF")
DKK = Currency("DKK")
DOP = Currency("DOP")
DZD = Currency("DZD")
EGP = Currency("EGP")
ERN = Currency("ERN")
ETB = Currency("ETB")
EUR = Currency("EUR")
FJD = Currency("FJD")
FKP = Currency("FKP")
GBP = Currency("GBP")
GEL = Currency("GEL")
GGP = Currency("GGP")
GHS = Currency("GHS")
GIP = Currency("GIP")
GMD = Currency("GMD")
GNF = Currency("GNF")
GTQ = Currency("GTQ")
GYD = Currency("GYD")
HKD = Currency("HKD")
HNL = Currency("HNL")
HRK = Currency("HRK")
HTG = Currency("HTG")
HUF = Currency("HUF")
IDR = Currency("IDR")
ILS = Currency("ILS")
IMP = Currency("IMP")
INR = Currency("INR")
IQD = Currency("IQD")
IRR = Currency("IRR")
ISK = Currency("ISK")
JEP = Currency("JEP")
JMD = Currency("JMD")
JOD = Currency("JOD")
JPY = Currency("JPY")
KES = Currency("KES")
KGS = Currency("KGS")
KHR = Currency("KHR")
KMF = Currency("KMF")
KPW = Currency("KPW")
KRW = Currency("KRW")
KWD = Currency("KWD")
KYD = Currency("KYD")
KZT = Currency("KZT")
LAK = Currency("LAK")
LBP = Currency("LBP")
LKR = Currency("LKR")
LRD = Currency("LRD")
LSL = Currency("LSL")
LTL = Currency("LTL")
LVL = Currency("LVL")
LYD = Currency("LYD")
MAD = Currency("MAD")
MDL = Currency("MDL")
MGA = Currency("MGA")
MKD = Currency("MKD")
MMK = Currency("MMK")
MNT = Currency("MNT")
MOP = Currency("MOP")
MRO = Currency("MRO")
MUR = Currency("MUR")
MVR = Currency("MVR")
MWK = Currency("MWK")
MXN = Currency("MXN")
MYR = Currency("MYR")
MZN = Currency("MZN")
NAD = Currency("NAD")
NGN = Currency("NGN")
NIO = Currency("NIO")
NOK = Currency("NOK")
NPR = Currency("NPR")
NZD = Currency("NZD")
OMR = Currency("OMR")
PAB = Currency("PAB")
PEN = Currency("PEN")
PGK = Currency("PGK")
PHP = Currency("PHP")
PKR = Currency("PKR")
PLN = Currency("PLN")
PYG = Currency("PYG")
QAR = Currency("QAR")
RON = Currency("RON")
RSD = Currency("RSD")
RUB = Currency("RUB")
RWF = Currency("RWF")
SAR = Currency("SAR")
SBD = Currency("SBD")
SCR = Currency("SCR")
SDG = Currency("SDG")
SEK = Currency("SEK")
SGD = Currency("SGD")
SHP = Currency("SHP")
SLL = Currency("SLL")
SOS = Currency("SOS")
SRD = Currency("SRD")
STD = Currency("STD")
SVC = Currency("SVC")
SYP = Currency("SYP")
SZL = Currency("SZL")
THB = Currency("THB")
TJS = Currency("TJS")
TMT = Currency("TMT")
TND = Currency("TND")
TOP = Currency("TOP")
TRY = Currency("TRY")
TTD = Currency("TTD")
TWD = Currency("TWD")
TZS = Currency("TZS")
UAH = Currency("UAH")
UGX = Currency("UGX")
USD = Currency("USD")
UYU = Currency("UYU")
UZS = Currency("UZS")
VEF = Currency("VEF")
VND = Currency("VND")
VUV = Currency("VUV")
WST = Currency("WST")
XAF = Currency("XAF")
XAG = Currency("XAG")
XAU = Currency("XAU")
XCD = Currency("XCD")
XDR = Currency("XDR")
XOF = Currency("XOF")
XPF = Currency("XPF")
YER = Currency("YER")
ZAR = Currency("ZAR")
ZMK = Currency("ZMK")
ZMW = Currency("ZMW")
ZWL = Currency("ZWL")

ALL_CURRENCIES = (
    AED, AFN, ALL, AMD, ANG, AOA, ARS, AUD, AWG, AZN,
    BAM, BBD, BDT, BGN, BHD, BIF, BMD, BND, BOB, BRL,
    BSD, BTC, BTN, BWP, BYN, BYR, BZD, CAD, CDF, CHF,
    CLF, CLP, CNY, COP, CRC, CUC, CUP, CVE, CZK, DJF,
    DKK, DOP, DZD, EGP, ERN, ETB, EUR, FJD, FKP, GBP,
    GEL, GGP, GHS, GIP, GMD, GNF, GTQ, GYD, HKD, HNL,
    HRK, HTG, HUF, IDR, ILS, IMP, INR, IQD, IRR, ISK,
    JEP, JMD, JOD, JPY, KES, KGS, KHR, KMF, KPW, KRW,
    KWD, KYD, KZT, LAK, LBP, LKR, LRD, LSL, LTL, LVL,
    LYD, MAD, MDL, MGA, MKD, MMK, MNT, MOP, MRO, MUR,
    MVR, MWK, MXN, MYR, MZN, NAD, NGN, NIO, NOK, NPR,
    NZD, OMR, PAB, PEN, PGK, PHP, PKR, PLN, PYG, QAR,
    RON, RSD, RUB, RWF, SAR, SBD, SCR, SDG, SEK, SGD,
    SHP, SLL, SOS, SRD, STD, SVC, SYP, SZL, THB, TJS,
    TMT, TND, TOP, TRY, TTD, TWD, TZS, UAH, UGX, USD,
    UYU, UZS, VEF, VND, VUV, WST, XAF, XAG, XAU, XCD,
    XDR, XOF, XPF, YER, ZAR, ZMK, ZMW, ZWL,
)

__all__ = [
    "Currency",
    "Currencies",
    "ALL_CURRENCIES",
    "AED",
    "AFN",
    "ALL",
    "AMD",
    "ANG",
    "AOA",
    "ARS",
    "AUD",
    "AWG",
    "AZN",
    "BAM",
    "BBD",
    "BDT",
    "BGN",
    "BHD",
    "BIF",
    "BMD",
    "BND",
    "BOB",
    "BRL",
    "BSD",
    "BTC",
    "BTN",
    "BWP",
    "BYN",
    "BYR",
    "BZD",
    "CAD",
    "CDF",
    "CHF",
    "CLF",
    "CLP",
    "CNY",
    "COP",
    "CRC",
    "CUC",
    "CUP",
    "CVE",
    "CZK",
    "DJF",
    "DKK",
    "DOP",
    "DZD",
    "EGP",
    "ERN",
    "ETB",
    "EUR",
    "FJD",
    "FKP",
    "GBP",
    "GEL",
    "GGP",
    "GHS",
    "GIP",
    "GMD",
    "GNF",
    "GTQ",
    "GYD",
    "HKD",
    "HNL",
    "HRK",
    "HTG",
    "HUF",
    "IDR",
    "ILS",
    "IMP",
    "INR",
    "IQD",
    "IRR",
    "ISK",
    "JEP",
    "JMD",
    "JOD",
    "JPY",
    "KES",
    "KGS",
    "KHR",
    "KMF",
    "KPW",
    "KRW",
    "KWD",
    "KYD",
    "KZT",
    "LAK",
    "LBP",
    "LKR",
    "LRD",
    "LSL",
    "LTL",
    "LVL",
    "LYD",
    "MAD",
    "MDL",
    "MGA",
    "MKD",
    "MMK",
    "MNT",
    "MOP",
    "MRO",
    "MUR",
    "MVR",
    "MWK",
    "MXN",
    "MYR",
    "MZN",
    "NAD",
    "NGN",
    "NIO",
    "NOK",
    "NPR",
    "NZD",
    "OMR",
    "PAB",
    "PEN",
    "PGK",
    "PHP",
    "PKR",
    "PLN",
    "PYG",
    "QAR",
    "RON",
    "RSD",
    "RUB",
    "RWF",
    "SAR",
    "SBD",
    "SCR",
    "SDG",
    "SEK",
    "SGD",
    "SHP",
    "SLL",
    "SOS",
    "SRD",
    "STD",
    "SVC",
    "SYP",
    "SZL",
    "THB",
    "TJS",
    "TMT",
    "TND",
    "TOP",
    "TRY",
    "TTD",
    "TWD",
    "TZS",
    "UAH",
    "UGX",
    "USD",
    "UYU",
    "UZS",
    "VEF",
    "VND",
    "VUV",
    "WST",
    "XAF",
    "XAG",
    "XAU",
    "XCD",
    "XDR",
    "XOF",
    "XPF",
    "YER",
    "ZAR",
    "ZMK",
    "ZMW",
    "ZWL",
]
