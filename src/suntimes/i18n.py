"""Simple two-language (en/ko) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "row_sunrise": {
        "en": "Sunrise",
        "ko": "일출",
    },
    "row_solar_noon": {
        "en": "Solar Noon",
        "ko": "남중",
    },
    "row_sunset": {
        "en": "Sunset",
        "ko": "일몰",
    },
    "row_morning_golden_hour": {
        "en": "Morning Golden Hour",
        "ko": "아침 골든아워",
    },
    "row_evening_golden_hour": {
        "en": "Evening Golden Hour",
        "ko": "저녁 골든아워",
    },
    "row_civil_dawn": {
        "en": "Civil Dawn",
        "ko": "시민박명 시작",
    },
    "row_civil_dusk": {
        "en": "Civil Dusk",
        "ko": "시민박명 끝",
    },
    "row_nautical_dawn": {
        "en": "Nautical Dawn",
        "ko": "항해박명 시작",
    },
    "row_nautical_dusk": {
        "en": "Nautical Dusk",
        "ko": "항해박명 끝",
    },
    "row_astronomical_dawn": {
        "en": "Astronomical Dawn",
        "ko": "천문박명 시작",
    },
    "row_astronomical_dusk": {
        "en": "Astronomical Dusk",
        "ko": "천문박명 끝",
    },
    "row_day_length": {
        "en": "Day Length",
        "ko": "낮 길이",
    },
    "not_available": {
        "en": "N/A",
        "ko": "해당 없음",
    },
    "duration": {
        "en": "{hours}h {minutes}m",
        "ko": "{hours}시간 {minutes}분",
    },
    "msg_polar_day": {
        "en": "The sun does not set on this date at this location.",
        "ko": "이 날짜에 이 지역에서는 해가 지지 않아요.",
    },
    "msg_polar_night": {
        "en": "The sun does not rise on this date at this location.",
        "ko": "이 날짜에 이 지역에서는 해가 뜨지 않아요.",
    },
    "msg_no_sunrise": {
        "en": "The sun does not rise on this date at this location.",
        "ko": "이 날짜에 이 지역에서는 해가 뜨지 않아요.",
    },
    "msg_no_sunset": {
        "en": "The sun does not set on this date at this location.",
        "ko": "이 날짜에 이 지역에서는 해가 지지 않아요.",
    },
    "msg_no_twilight": {
        "en": "The sky does not get this dark on this date at this location.",
        "ko": "이 날짜에 이 지역에서는 하늘이 이만큼 어두워지지 않아요.",
    },
    "near_location": {
        "en": "Nearest location: {label} ({distance} km away)",
        "ko": "가장 가까운 지역: {label} ({distance} km)",
    },
    "nearby_title": {
        "en": "Nearby locations",
        "ko": "주변 지역",
    },
    "no_nearby": {
        "en": "No known location nearby. Try searching by name.",
        "ko": "가까운 지역을 찾지 못했어요. 이름으로 검색해 보세요.",
    },
    "no_search_results": {
        "en": "No matching locations.",
        "ko": "일치하는 지역이 없어요.",
    },
    "typical_daylight": {
        "en": "Typical day length at this latitude: {range} h (longest in {longest}, shortest in {shortest})",
        "ko": "이 위도의 일반적인 낮 길이: {range}시간 (가장 긴 달 {longest}, 가장 짧은 달 {shortest})",
    },
    "error_unknown_slug": {
        "en": "Unknown location: {slug}",
        "ko": "알 수 없는 지역이에요: {slug}",
    },
    "error_coordinates": {
        "en": "Invalid coordinates ({error})",
        "ko": "좌표가 올바르지 않아요 ({error})",
    },
    "error_date_range": {
        "en": "Date out of range ({error})",
        "ko": "계산할 수 없는 날짜예요 ({error})",
    },
    "chart_daylight": {
        "en": "Daylight (hours)",
        "ko": "낮 길이 (시간)",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
