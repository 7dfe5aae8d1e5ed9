"""
Sales dashboard.
A Flask app serving the generated sales data as JSON, plus one HTML page
with year/region/category/min-sales filters and a line/bar/pie chart switcher.
"""

import sys
import os
import logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flask import Flask, request, jsonify, render_template
from dotenv import load_dotenv

load_dotenv()

from salesboard import (
    ChartSelector,
    RecordGenerator,
    SalesQuery,
    SalesStore,
    Settings,
    UnsupportedYear,
    breakdown,
    build_chart,
    format_currency,
    format_percentage,
    growth_rate,
    is_supported_year,
    period_kpis,
    to_figure,
)
from dashboard.data import RECENT_ORDERS, TOP_PRODUCTS, CUSTOMER_METRICS

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level,
                    format='%(asctime)s %(levelname)s %(name)s: %(message)s')

app = Flask(__name__)

# --- State (in-memory, single session) ---
store = SalesStore(
    RecordGenerator(seed=settings.seed),
    fetch_delay=settings.fetch_delay,
    default_year=settings.default_year,
)
chart_selector = ChartSelector()

store.fetch(store.current_year)


def _optional_float(name):
    raw = request.args.get(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _year_arg():
    raw = request.args.get('year')
    if raw is None:
        return store.current_year
    try:
        year = int(raw)
    except ValueError:
        raise ValueError(f"year must be an integer, got {raw!r}")
    if not is_supported_year(year):
        raise UnsupportedYear(year)
    return year


def _query_from_args():
    """Build a SalesQuery from request args. Missing args mean 'match all'."""
    return SalesQuery(
        year=_year_arg(),
        region=request.args.get('region'),
        category=request.args.get('category'),
        min_sales=_optional_float('min_sales'),
    )


def _session_state():
    """Loading/error state shared by every data route."""
    return {
        'year': store.current_year,
        'is_loading': store.is_loading,
        'error': store.error,
        'generation': store.generation,
        'total': len(store.records),
    }


def _data_state(spec):
    rows = store.filtered(spec)
    return {
        **_session_state(),
        'filters': spec.to_dict(),
        'filtered': len(rows),
        'data': [r.to_dict() for r in rows],
    }


@app.errorhandler(UnsupportedYear)
def unsupported_year(e):
    return jsonify({'error': str(e), 'years': store.available_years()}), 400


@app.errorhandler(ValueError)
def bad_request(e):
    return jsonify({'error': str(e)}), 400


# --- Pages ---

@app.route('/')
def index():
    return render_template('index.html')


# --- Data ---

@app.route('/api/years')
def get_years():
    return jsonify({
        'years': store.available_years(),
        'regions': store.regions,
        'categories': store.product_categories,
        'current_year': store.current_year,
    })


@app.route('/api/data')
def get_data():
    return jsonify(_data_state(_query_from_args()))


@app.route('/api/summary')
def get_summary():
    year = _year_arg()
    summary = store.summary(year)
    if summary is None:
        return jsonify({**_session_state(), 'summary': None, 'kpis': None})

    current = store.filtered(SalesQuery(year=year))
    # Same months of the year before, generated with the current fetch
    previous = store.previous_period()

    kpis = period_kpis(current, previous)
    prev_revenue = sum(r.revenue for r in previous)
    return jsonify({
        **_session_state(),
        'summary': summary.to_dict(),
        'kpis': kpis.to_dict(),
        'revenue_growth': growth_rate(summary.total_revenue, prev_revenue),
        'display': {
            'total_sales': format_currency(summary.total_sales),
            'total_revenue': format_currency(summary.total_revenue),
            'average_order_value': format_currency(summary.average_order_value),
            'sales_growth': format_percentage(kpis.sales_growth),
            'total_transactions': f"{kpis.total_transactions:,}",
        },
    })


@app.route('/api/breakdown')
def get_breakdown():
    by = request.args.get('by', 'region')
    rows = store.filtered(_query_from_args())
    return jsonify({**_session_state(), 'by': by, 'rows': breakdown(rows, by)})


# --- Charts ---

@app.route('/api/chart')
def get_chart():
    kind = request.args.get('type', chart_selector.kind.value)
    spec = _query_from_args()
    # Threshold applies to monthly totals, not to individual records
    rows = store.filtered(SalesQuery(year=spec.year, region=spec.region, category=spec.category))
    payload = build_chart(kind, rows, min_sales=spec.min_sales)
    return jsonify({
        **_session_state(),
        'chart': payload.to_dict(),
        'fig_json': to_figure(payload).to_json(),
    })


@app.route('/api/chart/type', methods=['POST'])
def set_chart_type():
    kind = (request.get_json(silent=True) or {}).get('type')
    return jsonify({'type': chart_selector.select(kind).value})


# --- Refresh ---

@app.route('/api/fetch', methods=['POST'])
def fetch_year():
    year = (request.get_json(silent=True) or {}).get('year')
    if not isinstance(year, int):
        return jsonify({'error': 'year must be an integer'}), 400
    stored = store.fetch(year)
    return jsonify({**_session_state(), 'stored': stored})


@app.route('/api/refresh', methods=['POST'])
def refresh():
    stored = store.refresh()
    return jsonify({**_session_state(), 'stored': stored})


@app.route('/api/retry', methods=['POST'])
def retry():
    stored = store.retry()
    return jsonify({**_session_state(), 'stored': stored})


# --- Static panels ---

@app.route('/api/showcase')
def showcase():
    return jsonify({
        'recent_orders': RECENT_ORDERS,
        'top_products': TOP_PRODUCTS,
        'customer_metrics': CUSTOMER_METRICS,
    })


if __name__ == '__main__':
    print(f"Sales dashboard running at http://localhost:{settings.port}")
    print(f"Loaded {len(store.records)} records for {store.current_year}")
    app.run(debug=True, port=settings.port)
