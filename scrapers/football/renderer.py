"""
Headless Page Renderer
======================

Loads a roster page in headless Chrome so that rosters built by JavaScript
are present in the HTML we parse. Only used when a scrape asks for
render=True; plain HTTP is the default.

Requires the optional 'render' extra:
    pip install selenium webdriver-manager
"""

import time
from typing import Tuple

from loguru import logger

from config.settings import Config
from scrapers.exceptions import FetchFailure

# Selenium imports
try:
    from selenium import webdriver
    from selenium.common.exceptions import WebDriverException
    from selenium.webdriver.chrome.options import Options
    from selenium.webdriver.chrome.service import Service
    from selenium.webdriver.common.by import By
    from selenium.webdriver.support.ui import WebDriverWait
    from selenium.webdriver.support import expected_conditions as EC
    from webdriver_manager.chrome import ChromeDriverManager
    SELENIUM_AVAILABLE = True
except ImportError:
    SELENIUM_AVAILABLE = False


def create_driver(user_agent: str = Config.USER_AGENT):
    """Create a headless Chrome driver for JavaScript rendering."""
    options = Options()
    options.add_argument('--headless')
    options.add_argument('--no-sandbox')
    options.add_argument('--disable-dev-shm-usage')
    options.add_argument('--disable-gpu')
    options.add_argument('--window-size=1920,1080')
    options.add_argument(f'user-agent={user_agent}')

    service = Service(ChromeDriverManager().install())
    driver = webdriver.Chrome(service=service, options=options)
    driver.set_page_load_timeout(Config.RENDER_TIMEOUT)
    return driver


def render_page(url: str, user_agent: str = Config.USER_AGENT) -> Tuple[str, str]:
    """
    Load a page in headless Chrome and return its rendered HTML.

    Args:
        url: Page to load
        user_agent: Browser identity to present

    Returns:
        (page HTML after scripts ran, final URL after redirects)

    Raises:
        FetchFailure: When Selenium is not installed or the page cannot be loaded
    """
    if not SELENIUM_AVAILABLE:
        raise FetchFailure(
            url,
            'rendering requires Selenium. Install with: pip install selenium webdriver-manager'
        )

    driver = None
    try:
        logger.info(f"Rendering: {url}")
        driver = create_driver(user_agent)
        driver.get(url)

        WebDriverWait(driver, Config.RENDER_TIMEOUT).until(
            EC.presence_of_element_located((By.TAG_NAME, "body"))
        )

        # Give client-side frameworks time to build the roster
        time.sleep(Config.RENDER_WAIT_SECONDS)

        return driver.page_source, driver.current_url

    except WebDriverException as e:
        logger.error(f"Headless render failed for {url}: {e}")
        raise FetchFailure(url, f"headless browser error: {e.msg or type(e).__name__}")

    except Exception as e:
        # Driver download or browser start-up (webdriver-manager, Chrome missing)
        logger.error(f"Headless browser setup failed for {url}: {type(e).__name__}: {e}")
        raise FetchFailure(url, f"headless browser setup failed: {e}")

    finally:
        if driver:
            driver.quit()
