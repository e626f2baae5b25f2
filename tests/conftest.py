"""
Pytest configuration and shared fixtures
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from filterscope.config.settings import Settings
from filterscope.utils.sql_parser import SQLParser


@pytest.fixture
def config_file(tmp_path):
    """Write a minimal test configuration and return its path"""
    import yaml

    config = {
        'parser': {
            'log_query_length': 200,
        },
        'policies': {
            'enforce': True,
            'tables': {
                'sales.orders': {
                    'require_filter': True,
                    'required_columns': ['cob_date']
                },
                'Sales.Positions': {
                    'require_filter': False,
                    'required_columns': ['cob_date', 'book_id']
                },
                'ref.calendar': {
                    'require_filter': True
                }
            }
        },
        'logging': {
            'level': 'INFO',
            'log_dir': str(tmp_path / 'logs'),
            'console_colors': False
        }
    }

    path = tmp_path / 'config.yaml'
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(config, f)

    return str(path)


@pytest.fixture
def test_settings(config_file):
    """Create test settings with minimal configuration"""
    return Settings(config_file)


@pytest.fixture
def sql_parser():
    """Create SQL parser instance"""
    return SQLParser()


@pytest.fixture
def sample_queries():
    """Sample SQL queries for testing"""
    return {
        'simple_select': "SELECT id, amount FROM sales.orders WHERE cob_date='2024-01-15'",

        'with_aggregate': """
            SELECT category, SUM(amount)
            FROM sales.orders
            WHERE cob_date='2024-01-15' AND region='EU'
            GROUP BY category
        """,

        'with_join': """
            SELECT a.id, b.name
            FROM sales.orders a
            JOIN sales.products b ON a.product_id = b.id
            WHERE a.cob_date='2024-01-15'
        """,

        'with_subquery_filter': (
            "SELECT * FROM sales.orders "
            "WHERE customer_id IN (SELECT id FROM sales.customers WHERE tier='gold')"
        ),

        'wrapped': "(SELECT id FROM sales.orders WHERE cob_date='2024-01-15')",

        'missing_filter': "SELECT category, SUM(amount) FROM sales.orders GROUP BY category",

        'wrong_filter_column': "SELECT id FROM sales.orders WHERE region='EU'",
    }
