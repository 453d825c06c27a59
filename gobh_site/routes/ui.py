"""
Web UI route handlers for the marketing pages.
"""
import logging
from html import escape
from typing import Any, List

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..config import config
from ..properties import Property, get_all_properties, get_property_by_slug

logger = logging.getLogger(__name__)
router = APIRouter(tags=["ui"])

HERO_IMAGE = ("https://images.unsplash.com/photo-1486406146926-c627a92ad1ab"
              "?crop=entropy&cs=srgb&fm=jpg&q=85")

WHY_US = [
    ("Rapid Closing",
     "Complete your sale in as little as 7 days, or select a timeline that suits your needs perfectly."),
    ("100% Cash Transactions",
     "No financing delays or contingencies. Receive immediate cash payment with complete transparency."),
    ("As-Is Purchases",
     "Zero repairs required. We acquire properties in their current condition, eliminating renovation costs and hassles."),
    ("20+ Years Experience",
     "Established expertise and integrity. We maintain unwavering commitment to fair dealing with every client."),
]

PROCESS_STEPS = [
    ("Receive Your Offer",
     "Connect with us directly - no commissions, no extra charges. Receive your competitive cash quote within 48 hours."),
    ("Property Walkthrough",
     "Schedule a convenient property inspection with our professional team. We'll present a compelling cash offer with zero obligation."),
    ("Close & Get Paid",
     "We'll finalize your home purchase within three weeks or less, completely hassle-free. Select the closing date that works best for your schedule."),
]

PROPERTY_TYPES = ["Single Family", "Town Houses", "Condominium", "Mobile Home", "Multi Family"]

FAQ = [
    ("How does selling to GOBH Investments differ from traditional real estate sales?",
     "With GOBH Investments, you bypass the lengthy conventional process. No agent fees, no repairs, no staging, "
     "and no waiting for buyer financing. We provide direct cash offers and close on your preferred timeline."),
    ("What is the typical timeline for completing a sale?",
     "We can finalize transactions in as little as 7 days, or you may choose your preferred closing date. "
     "Most deals are completed within three weeks or less."),
    ("Are repairs necessary before selling?",
     "Absolutely not! We acquire properties in any condition. Whether your home requires extensive repairs or is "
     "move-in ready, we'll present you with a fair cash offer as-is."),
    ("How do I request a cash offer from GOBH Investments?",
     "Simply complete our contact form above with your property information. We'll contact you within 48 hours "
     "with a no-obligation cash offer."),
    ("Can I select my own closing date?",
     "Absolutely! We operate on your schedule. Whether you need to close immediately or require additional time "
     "to relocate, we'll accommodate your timeline preferences."),
]

# Listing facts shown on the detail page, in display order
PROPERTY_FACTS = [
    ("Location", "location"),
    ("Address", "address"),
    ("Property type", "property_type"),
    ("Status", "status"),
    ("Year acquired", "year_acquired"),
    ("Units", "units"),
    ("Square footage", "square_footage"),
]

CONTACT_FORM_SCRIPT = '''<script>
function bindContactForm(form) {
  const terms = form.querySelector('input[name="agreeToTerms"]');
  const submit = form.querySelector('button[type="submit"]');
  const message = form.querySelector('[data-role="message"]');
  const sync = () => { submit.disabled = !terms.checked; };
  terms.addEventListener('change', sync);
  sync();
  form.addEventListener('submit', async (e) => {
    e.preventDefault();
    submit.disabled = true;
    submit.textContent = 'Submitting...';
    message.textContent = '';
    const payload = {
      name: form.elements['name'].value, email: form.elements['email'].value,
      phone: form.elements['phone'].value, address: form.elements['address'].value,
      agreeToTerms: terms.checked
    };
    try {
      const res = await fetch('/api/contact', {
        method: 'POST', headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(payload)
      });
      const data = await res.json();
      if (res.ok) {
        message.className = 'text-center font-medium text-sm text-green-600';
        message.textContent = "Thank you! We'll contact you shortly.";
        form.reset();
        const modal = form.closest('#offerModal');
        if (modal) { setTimeout(() => modal.classList.add('hidden'), 2000); }
      } else {
        message.className = 'text-center font-medium text-sm text-red-600';
        message.textContent = data.error || 'Something went wrong. Please try again.';
      }
    } catch (err) {
      message.className = 'text-center font-medium text-sm text-red-600';
      message.textContent = 'Failed to submit. Please try again.';
    } finally {
      submit.textContent = 'Submit Request';
      sync();
    }
  });
}
document.querySelectorAll('form[data-role="contact"]').forEach(bindContactForm);
function openOffer() { document.getElementById('offerModal').classList.remove('hidden'); }
function closeOffer() { document.getElementById('offerModal').classList.add('hidden'); }
</script>'''


def page(title: str, body: str) -> str:
    """Wrap page content in the shared document shell and navigation."""
    return f'''<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1"/>
  <title>{escape(title)}</title>
  <meta name="description" content="{escape(config.SITE_DESCRIPTION)}"/>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="min-h-screen bg-white text-slate-900">
<nav class="bg-blue-900 text-white py-4 px-6 sticky top-0 z-40 shadow-lg">
  <div class="max-w-7xl mx-auto flex justify-between items-center">
    <a href="/" class="text-2xl font-bold">{escape(config.SITE_NAME)}</a>
    <div class="space-x-6 flex items-center">
      <a href="/" class="hover:text-amber-400 transition-colors">Home</a>
      <a href="/features" class="hover:text-amber-400 transition-colors">Features</a>
      <a href="/portfolio" class="hover:text-amber-400 transition-colors">Portfolio</a>
      <button onclick="openOffer()" class="px-4 py-2 rounded bg-amber-500 text-slate-900 hover:bg-amber-400">Get Offer</button>
    </div>
  </div>
</nav>
{body}
{offer_modal()}
{footer()}
{CONTACT_FORM_SCRIPT}
</body></html>'''


def contact_form() -> str:
    fields = [
        ("name", "Full Name *", "text", "John Doe"),
        ("email", "Email Address *", "email", "john@example.com"),
        ("phone", "Phone Number *", "tel", "(555) 123-4567"),
        ("address", "Property Address *", "text", "123 Main St, New York, NY"),
    ]
    html_parts = ['<form data-role="contact" class="space-y-4">']
    for name, label, input_type, placeholder in fields:
        html_parts.append(f'''<div class="space-y-2">
<label class="text-sm font-medium">{label}</label>
<input class="w-full border rounded px-3 py-2" name="{name}" type="{input_type}" required placeholder="{escape(placeholder)}"/>
</div>''')
    html_parts.append(f'''<label class="flex items-start space-x-2 text-xs text-slate-500 leading-relaxed">
<input type="checkbox" name="agreeToTerms" required class="mt-1"/>
<span>I have read and agree to the <a href="#" class="text-blue-900 hover:underline">Privacy Policy</a> and
<a href="#" class="text-blue-900 hover:underline">Terms and Conditions</a>. By submitting this form, you consent to
receive communications from {escape(config.SITE_NAME)}. Message frequency varies. You can unsubscribe anytime.</span>
</label>
<button type="submit" class="w-full bg-blue-900 hover:bg-blue-800 text-white text-lg py-3 rounded disabled:opacity-50">Submit Request</button>
<p data-role="message" class="text-center font-medium text-sm"></p>
<p class="text-center text-xs text-slate-500">Free consultation with no obligation</p>
</form>''')
    return ''.join(html_parts)


def offer_modal() -> str:
    return f'''<div id="offerModal" class="fixed inset-0 bg-black/50 hidden flex items-center justify-center p-4 z-50">
<div class="bg-white rounded-xl shadow-xl w-full max-w-2xl max-h-[90vh] overflow-y-auto p-6">
<div class="flex justify-between items-center mb-2">
<h2 class="text-2xl font-bold text-blue-900">Request Your Cash Offer</h2>
<button onclick="closeOffer()" class="text-slate-500">✕</button>
</div>
<p class="text-slate-500 mb-4">Fill out the form below and we'll contact you within 24 hours with a no-obligation offer.</p>
{contact_form()}
</div></div>'''


def footer() -> str:
    return f'''<footer class="bg-blue-900 text-white py-12 px-6">
<div class="max-w-7xl mx-auto grid md:grid-cols-3 gap-8">
<div>
<h3 class="text-xl font-bold mb-2">{escape(config.SITE_NAME)}</h3>
<p class="text-blue-100">{escape(config.SITE_TAGLINE)}. Over two decades of market excellence.</p>
</div>
<div>
<h4 class="font-semibold mb-2">Quick Links</h4>
<ul class="space-y-1 text-blue-100">
<li><a href="/" class="hover:text-amber-400">Home</a></li>
<li><a href="/features" class="hover:text-amber-400">Features</a></li>
<li><a href="/portfolio" class="hover:text-amber-400">Portfolio</a></li>
</ul>
</div>
<div>
<h4 class="font-semibold mb-2">Get In Touch</h4>
<p class="text-blue-100">Request a no-obligation cash offer and we'll reach out within 24 hours.</p>
</div>
</div>
<div class="max-w-7xl mx-auto border-t border-blue-800 mt-8 pt-6 text-center text-blue-200 text-sm">
&copy; {escape(config.SITE_NAME)}. All rights reserved.
</div>
</footer>'''


def back_link() -> str:
    return '<a href="/" class="inline-flex items-center gap-2 text-blue-900 hover:text-amber-500 mb-8">← Back to Home</a>'


@router.get('/', response_class=HTMLResponse)
async def index():
    """Home page with the lead capture form."""
    html_parts = [f'''<section class="relative bg-cover bg-center py-20 px-6"
 style="background-image: linear-gradient(rgba(30, 58, 138, 0.85), rgba(30, 58, 138, 0.85)), url({HERO_IMAGE});">
<div class="max-w-7xl mx-auto grid md:grid-cols-2 gap-12 items-start">
<div class="text-white">
<h1 class="text-5xl md:text-6xl font-bold mb-6">{escape(config.SITE_TAGLINE)}</h1>
<p class="text-2xl md:text-3xl mb-4">We purchase homes in any condition, anywhere</p>
<div class="space-y-3 text-lg mb-8">
<p>Direct property acquisitions from owners - completed within 21 days or less</p>
<p>Zero commissions, zero closing fees, zero hidden charges - pure cash offers</p>
<p class="font-bold text-amber-400 text-xl">Over Two Decades of Market Excellence</p>
<p>Straightforward, personal service - no middlemen, no listings, no complications</p>
</div>
<button onclick="openOffer()" class="bg-amber-500 hover:bg-amber-400 text-slate-900 text-lg px-8 py-4 rounded">Request Your Cash Offer Today</button>
</div>
<div class="bg-white rounded-xl shadow-2xl p-6">
<h2 class="text-2xl font-bold text-blue-900 text-center">Get Your Cash Offer Today</h2>
<p class="text-slate-500 text-center mb-4">Please keep your line open, we'll contact you within 24 hours!</p>
{contact_form()}
</div>
</div>
</section>''']

    html_parts.append('<section class="py-20 px-6"><div class="max-w-7xl mx-auto">')
    html_parts.append(f'<div class="text-center mb-16"><h2 class="text-4xl font-bold text-blue-900 mb-4">Why Partner With {escape(config.SITE_NAME)}?</h2>')
    html_parts.append('<p class="text-lg text-slate-500 max-w-3xl mx-auto">Experience seamless property transactions with transparent '
                      'communication and personalized service designed to maximize your satisfaction.</p></div>')
    html_parts.append('<div class="grid md:grid-cols-2 lg:grid-cols-4 gap-8">')
    for title, text in WHY_US:
        html_parts.append(f'<div class="text-center border rounded-xl p-6 hover:shadow-xl transition-shadow">'
                          f'<h3 class="text-xl font-semibold mb-2">{escape(title)}</h3>'
                          f'<p class="text-slate-500">{escape(text)}</p></div>')
    html_parts.append('</div></div></section>')

    html_parts.append('<section class="py-20 px-6 bg-slate-100"><div class="max-w-5xl mx-auto">')
    html_parts.append('<div class="text-center mb-16"><h2 class="text-4xl font-bold text-blue-900 mb-4">Our Simple Process</h2>'
                      '<p class="text-lg text-slate-500">Straightforward, transparent, and completely hassle-free</p></div>')
    html_parts.append('<div class="grid md:grid-cols-3 gap-12">')
    for number, (title, text) in enumerate(PROCESS_STEPS, start=1):
        html_parts.append(f'<div class="text-center">'
                          f'<div class="mx-auto bg-blue-900 text-white w-16 h-16 rounded-full flex items-center justify-center text-2xl font-bold mb-6">{number}</div>'
                          f'<h3 class="text-2xl font-bold mb-4">{escape(title)}</h3>'
                          f'<p class="text-slate-500">{escape(text)}</p></div>')
    html_parts.append('</div></div></section>')

    html_parts.append('<section class="py-20 px-6"><div class="max-w-7xl mx-auto">')
    html_parts.append('<div class="text-center mb-16"><h2 class="text-4xl font-bold text-blue-900 mb-4">All Properties, Every Condition</h2>'
                      '<p class="text-lg text-slate-500 max-w-3xl mx-auto">Regardless of your situation, we have a customized solution '
                      'for you. No strings attached. No open houses. No last-minute letdowns.</p></div>')
    html_parts.append('<div class="grid md:grid-cols-3 lg:grid-cols-5 gap-6">')
    for property_type in PROPERTY_TYPES:
        html_parts.append(f'<div class="text-center border rounded-xl pt-8 pb-6 hover:shadow-lg hover:border-amber-400">'
                          f'<h3 class="font-bold text-lg">{escape(property_type)}</h3></div>')
    html_parts.append('</div></div></section>')

    html_parts.append('<section class="py-20 px-6 bg-slate-100"><div class="max-w-4xl mx-auto">')
    html_parts.append('<div class="text-center mb-16"><h2 class="text-4xl font-bold text-blue-900 mb-4">Frequently Asked Questions</h2>'
                      '<p class="text-lg text-slate-500">Everything you need to know about selling your property to us</p></div>')
    html_parts.append('<div class="space-y-4">')
    for question, answer in FAQ:
        html_parts.append(f'<details class="bg-white rounded-lg px-6 py-4 border">'
                          f'<summary class="text-lg font-semibold cursor-pointer hover:text-blue-900">{escape(question)}</summary>'
                          f'<p class="text-slate-500 mt-3">{escape(answer)}</p></details>')
    html_parts.append('</div></div></section>')

    return HTMLResponse(page(f"{config.SITE_NAME} - {config.SITE_TAGLINE}", ''.join(html_parts)))


@router.get('/features', response_class=HTMLResponse)
async def features():
    body = f'''<section class="py-20 px-6"><div class="max-w-4xl mx-auto">
{back_link()}
<h1 class="text-5xl font-bold text-blue-900 mb-8">Features</h1>
<p class="text-xl text-slate-500">This is the Features page. Content coming soon...</p>
</div></section>'''
    return HTMLResponse(page(f"Features - {config.SITE_NAME}", body))


def _display(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ', '.join(str(item) for item in value)
    return str(value)


def property_card(prop: Property) -> str:
    detail_url = f'/portfolio/{escape(prop.slug)}'
    subtitle = ' · '.join(escape(_display(v)) for v in (prop.location, prop.property_type, prop.status) if v)
    image = ''
    if prop.featured_image:
        image = (f'<img src="{escape(str(prop.featured_image))}" alt="{escape(_display(prop.title))}" loading="lazy" '
                 f'class="w-full h-48 object-cover rounded-t-xl" onerror="this.style.display=\'none\'"/>')
    return f'''<a href="{detail_url}" class="block bg-white border rounded-xl hover:shadow-xl transition-shadow">
{image}
<div class="p-4">
<h3 class="text-xl font-semibold text-blue-900">{escape(_display(prop.title or prop.slug))}</h3>
<div class="text-sm text-slate-500 mb-2">{subtitle}</div>
<p class="text-slate-600">{escape(prop.excerpt)}</p>
</div>
</a>'''


@router.get('/portfolio', response_class=HTMLResponse)
async def portfolio():
    """Grid of acquired properties."""
    properties: List[Property] = get_all_properties()

    html_parts = ['<section class="py-20 px-6"><div class="max-w-7xl mx-auto">', back_link()]
    html_parts.append('<h1 class="text-5xl font-bold text-blue-900 mb-8">Portfolio</h1>')
    if not properties:
        html_parts.append('<p class="text-xl text-slate-500">No properties yet. Content coming soon...</p>')
    else:
        html_parts.append('<div class="grid md:grid-cols-2 lg:grid-cols-3 gap-8">')
        html_parts.extend(property_card(prop) for prop in properties)
        html_parts.append('</div>')
    html_parts.append('</div></section>')

    return HTMLResponse(page(f"Portfolio - {config.SITE_NAME}", ''.join(html_parts)))


@router.get('/portfolio/{slug}', response_class=HTMLResponse)
async def property_detail(slug: str):
    """Detail page for a single listing."""
    prop = get_property_by_slug(slug)
    if prop is None:
        body = f'''<section class="py-20 px-6"><div class="max-w-4xl mx-auto">
<a href="/portfolio" class="text-blue-900 underline">← Back to Portfolio</a>
<h1 class="text-4xl font-bold text-blue-900 mt-4">Property not found</h1>
</div></section>'''
        return HTMLResponse(page(f"Not found - {config.SITE_NAME}", body), status_code=404)

    html_parts = ['<section class="py-20 px-6"><div class="max-w-5xl mx-auto">']
    html_parts.append('<a href="/portfolio" class="text-blue-900 underline">← Back to Portfolio</a>')
    html_parts.append(f'<h1 class="text-4xl font-bold text-blue-900 mt-4 mb-2">{escape(_display(prop.title or prop.slug))}</h1>')
    if prop.description:
        html_parts.append(f'<p class="text-lg text-slate-500 mb-6">{escape(_display(prop.description))}</p>')

    if prop.featured_image:
        html_parts.append(f'<img src="{escape(str(prop.featured_image))}" alt="{escape(_display(prop.title))}" '
                          f'class="w-full rounded-xl shadow mb-6"/>')

    facts = [(label, getattr(prop, attr)) for label, attr in PROPERTY_FACTS]
    facts = [(label, value) for label, value in facts if value not in (None, "")]
    if facts:
        html_parts.append('<div class="bg-slate-50 rounded-lg shadow p-4 mb-6"><h3 class="font-medium mb-2">Details</h3><ul class="space-y-1">')
        for label, value in facts:
            html_parts.append(f'<li class="flex justify-between"><span>{label}</span>'
                              f'<span class="text-slate-700">{escape(_display(value))}</span></li>')
        html_parts.append('</ul></div>')

    # Front matter keys without a dedicated field
    if prop.extra:
        html_parts.append('<div class="bg-white rounded-lg shadow p-4 mb-6"><h3 class="font-medium mb-2">More details</h3>')
        html_parts.append('<div class="grid grid-cols-1 md:grid-cols-2 gap-2">')
        for key, value in list(prop.extra.items())[:40]:
            html_parts.append(f'<div class="flex justify-between"><span class="text-slate-500">{escape(str(key))}</span>'
                              f'<span class="text-slate-800">{escape(_display(value))}</span></div>')
        html_parts.append('</div></div>')

    if prop.gallery:
        html_parts.append('<div class="mb-6"><h3 class="text-lg font-medium mb-3">Gallery</h3><ul class="list-disc pl-6">')
        for image_ref in prop.gallery:
            ref = escape(str(image_ref))
            html_parts.append(f'<li><a class="text-blue-700 underline" href="{ref}" target="_blank">{ref}</a></li>')
        html_parts.append('</ul></div>')

    # Rendered from trusted content files
    html_parts.append(f'<article class="prose max-w-none">{prop.content_html}</article>')
    html_parts.append('</div></section>')

    return HTMLResponse(page(f"{prop.title or prop.slug} - {config.SITE_NAME}", ''.join(html_parts)))
