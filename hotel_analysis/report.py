"""Human-readable report for an AnalysisResult."""

from typing import List

from hotel_analysis.analytics.ranking import AnalysisResult, HotelRanking

NO_DATA_MESSAGE = "No valid data found. Exiting."

# Display labels and raw-value formats per criterion
FEATURE_FORMATS = {
    'price': ('Avg price', '{:.2f}'),
    'discount': ('Avg discount', '{:.2%}'),
    'margin': ('Avg profit margin', '{:.2f}'),
    'visitors': ('Total visitors', '{:,.0f}'),
}


def format_hotel(ranking: HotelRanking) -> List[str]:
    hotel = ranking.hotel
    lines = [
        f"   Hotel: {hotel.hotel_name} ({hotel.city}, {hotel.destination_country})",
        f"   Final score: {ranking.final_score:.2f}",
    ]
    for name, component in ranking.components.items():
        label, fmt = FEATURE_FORMATS.get(name, (name.title(), '{:.2f}'))
        direction = "higher is better" if component.higher_is_better else "lower is better"
        lines.append(
            f"   - {label}: {fmt.format(component.value)} "
            f"-> score {component.score:.2f} ({direction})"
        )
    return lines


def format_report(result: AnalysisResult) -> List[str]:
    """
    Build the report lines.

    Returns a single "no data" line when the result is empty.
    """
    if result.is_empty:
        return [NO_DATA_MESSAGE]

    country = result.top_country
    lines = [
        "--- Hotel Booking Data Analysis ---",
        f"Analyzed {result.n_records:,} bookings across {result.n_hotels:,} hotels",
        "",
        f"1. Country with highest number of bookings: {country.category} "
        f"with {country.count:,} bookings.",
        "",
        "2. Most economical hotel:",
        *format_hotel(result.most_economical),
        "",
        "3. Most profitable hotel:",
        *format_hotel(result.most_profitable),
    ]
    return lines


def print_report(result: AnalysisResult) -> None:
    for line in format_report(result):
        print(line)
