"""
SVG drawings for the simulation tabs.

Every function here is a pure view of a state model and returns an HTML
string for a `gr.HTML` component; none of them changes state.
"""
from html import escape

from simulations import coordinates
from simulations.amino_builder import PARTS, ZONES
from simulations.peptide import BONDED, HYDROGEN_SELECTED, HYDROXYL_SELECTED, START
from states import NUM_RESIDUES, AminoBuilderState, PeptideBondState, Stage, StageSimulationState

ALPHA_COLOR = "#eab308"
BETA_COLOR = "#ef4444"
HBOND_COLOR = "#f472b6"

SUBUNIT_PATH = "M -20 35 C -50 55, -70 -10, -40 -30 S 20 -60, 50 -30 S 70 40, 30 50 S -10 60, -20 35"
UNFOLDED_PATH = "M -60 0 C -30 -60, 30 60, 60 0"

# (colour, label, folded transform, denatured transform)
SUBUNITS = [
    (ALPHA_COLOR, "α1", "translate(-50, -50) scale(1.35)", "translate(-220, -200) rotate(-45) scale(1.3)"),
    (BETA_COLOR, "β1", "translate(50, -50) scale(1.35) scale(-1, 1)", "translate(220, -200) rotate(45) scale(1.3)"),
    (ALPHA_COLOR, "α2", "translate(50, 50) scale(1.35) scale(-1, -1)", "translate(220, 200) rotate(135) scale(1.3)"),
    (BETA_COLOR, "β2", "translate(-50, 50) scale(1.35) scale(1, -1)", "translate(-220, 200) rotate(-135) scale(1.3)"),
]


def _svg(view_box, body, height=420):
    return (
        f'<div class="canvas-panel"><svg viewBox="{view_box}" width="100%" height="{height}" '
        f'xmlns="http://www.w3.org/2000/svg">{body}</svg></div>'
    )


def _line(p1, p2, color, width=2.5, dash="4 2", opacity=0.65):
    return (
        f'<line x1="{p1[0]:.1f}" y1="{p1[1]:.1f}" x2="{p2[0]:.1f}" y2="{p2[1]:.1f}" '
        f'stroke="{color}" stroke-width="{width}" stroke-dasharray="{dash}" opacity="{opacity}"/>'
    )


def _subunit(color, label, denatured):
    path = UNFOLDED_PATH if denatured else SUBUNIT_PATH
    width, shine = (15, 4) if denatured else (45, 12)
    parts = [
        f'<path d="{path}" stroke="{color}" stroke-width="{width}" stroke-linecap="round" fill="none"/>',
        f'<path d="{path}" stroke="white" stroke-width="{shine}" stroke-linecap="round" fill="none" opacity="0.25"/>',
    ]
    if not denatured:
        # Heme disc with its iron centre and a bound O2
        parts += [
            '<ellipse cx="0" cy="0" rx="16" ry="10" fill="#a855f7" stroke="#7e22ce" stroke-width="2"/>',
            '<circle cx="0" cy="0" r="5" fill="#3b82f6" stroke="#1d4ed8" stroke-width="1"/>',
            '<circle cx="6" cy="-4" r="3" fill="#bae6fd" opacity="0.9"/>',
        ]
    label_y = 50 if denatured else 5
    parts.append(
        f'<text x="0" y="{label_y}" text-anchor="middle" fill="white" font-size="12" '
        f'font-weight="bold" opacity="{0.5 if denatured else 0.8}">{label}</text>'
    )
    return "".join(parts)


def folding_svg(state: StageSimulationState) -> str:
    stage = state.current_stage
    body = []

    if stage is Stage.QUATERNARY and state.is_completed(Stage.QUATERNARY):
        body.append('<g transform="translate(400, 250)">')
        for color, label, folded, unfolded in SUBUNITS:
            transform = unfolded if state.is_denatured else folded
            body.append(f'<g transform="{transform}">{_subunit(color, label, state.is_denatured)}</g>')
        body.append("</g>")
        if state.is_denatured:
            body.append('<rect width="800" height="500" fill="#7f1d1d" opacity="0.15"/>')
        return _svg("0 0 800 500", "".join(body))

    if stage is Stage.PRIMARY:
        # mRNA strand under the ribosome
        body.append('<line x1="50" y1="235" x2="750" y2="235" stroke="#cbd5e1" stroke-width="6" '
                    'stroke-dasharray="1 8" opacity="0.4" stroke-linecap="round"/>')

    chain_visible = state.is_completed(Stage.PRIMARY) or (stage is Stage.PRIMARY and state.is_animating)
    if chain_visible:
        points = coordinates.chain_positions(state)
        path = " ".join(("M" if i == 0 else "L") + f" {x:.1f} {y:.1f}" for i, (x, y) in enumerate(points))
        body.append(f'<path d="{path}" fill="none" stroke="#94a3b8" stroke-width="4" '
                    'stroke-linecap="round" stroke-linejoin="round"/>')

        if stage is Stage.SECONDARY and state.is_completed(Stage.SECONDARY):
            for i, j in coordinates.hydrogen_bond_pairs(state.secondary_variant):
                body.append(_line(points[i], points[j], HBOND_COLOR))

        if stage is Stage.TERTIARY and state.is_completed(Stage.TERTIARY):
            cx, cy = coordinates.GLOBULE_CENTER
            body.append(f'<circle cx="{cx}" cy="{cy}" r="45" fill="rgba(234, 88, 12, 0.1)" '
                        'stroke="#ea580c" stroke-width="1" stroke-dasharray="5 5"/>')
            a, b = coordinates.DISULFIDE_BRIDGE
            body.append(_line(points[a], points[b], "#eab308", width=4, dash="none", opacity=1))
            a, b = coordinates.IONIC_BOND
            body.append(_line(points[a], points[b], "#ef4444", dash="3 3", opacity=1))

        for i in range(NUM_RESIDUES):
            x, y = points[i]
            color = coordinates.residue_color(i, stage)
            body.append(f'<circle cx="{x:.1f}" cy="{y:.1f}" r="11" fill="{color}" '
                        'stroke="rgba(0,0,0,0.4)" stroke-width="1"/>')
            if stage is Stage.TERTIARY and state.is_completed(Stage.TERTIARY):
                charge = {"acidic": "-", "basic": "+"}.get(coordinates.residue_class(i).value)
                if charge:
                    body.append(f'<text x="{x:.1f}" y="{y + 3.5:.1f}" text-anchor="middle" fill="white" '
                                f'font-size="9" font-weight="bold">{charge}</text>')

    if stage is Stage.PRIMARY and state.is_animating:
        body.append('<g transform="translate(400, 215)">'
                    '<path d="M -35,-8 C -35,-50 35,-50 35,-8 C 35,5 -35,5 -35,-8 Z" fill="#f87171" '
                    'stroke="#b91c1c" stroke-width="2" opacity="0.95"/>'
                    '<ellipse cx="0" cy="22" rx="28" ry="12" fill="#fca5a5" stroke="#b91c1c" stroke-width="2"/>'
                    '<text x="0" y="-35" text-anchor="middle" fill="white" font-size="9">RIBOSOME</text></g>')

    return _svg("0 0 800 500", "".join(body))


def _atom(cx, cy, color, label, size=20, glow=False, dimmed=False, text_color="white"):
    opacity = 0.3 if dimmed else 1
    halo = (f'<circle cx="{cx}" cy="{cy}" r="{size + 14}" fill="none" stroke="#facc15" '
            'stroke-width="2" stroke-dasharray="4 4"/>') if glow else ""
    return (
        f'<g opacity="{opacity}">{halo}<circle cx="{cx}" cy="{cy}" r="{size}" fill="{color}" '
        'stroke="rgba(255,255,255,0.2)" stroke-width="2"/>'
        f'<text x="{cx}" y="{cy + size / 3:.1f}" text-anchor="middle" fill="{text_color}" '
        f'font-size="{max(8, size * 0.7):.0f}" font-weight="bold">{label}</text></g>'
    )


def _bond(x1, y1, x2, y2):
    return (f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" stroke="#64748b" '
            'stroke-width="5" stroke-linecap="round"/>')


def _amino_acid(dx, step, first):
    """One amino acid drawn at horizontal offset `dx`."""
    g = [f'<g transform="translate({dx}, 0)">']
    g += [_bond(200, 180, 140, 180), _bond(200, 180, 200, 130), _bond(200, 180, 200, 240),
          _bond(200, 180, 260, 180), _bond(260, 180, 285, 130), _bond(260, 180, 300, 220),
          _bond(140, 180, 110, 140), _bond(140, 180, 110, 220)]
    g.append('<rect x="180" y="240" width="40" height="40" rx="6" fill="#f1f5f9" stroke="#cbd5e1"/>'
             '<text x="200" y="268" text-anchor="middle" fill="#0f172a" font-weight="bold" font-size="18">R</text>')
    g.append(_atom(200, 180, "#475569", "C"))
    g.append(_atom(200, 130, "#94a3b8", "H", size=12, text_color="#1e293b"))
    g.append(_atom(140, 180, "#a855f7", "N"))
    g.append(_atom(260, 180, "#475569", "C"))
    g.append(_atom(285, 130, "#ef4444", "O"))
    # The leaving OH belongs to the first residue, the leaving H to the second
    hydroxyl_glow = first and step == START
    hydroxyl_gone = first and step >= HYDROXYL_SELECTED
    hydrogen_glow = not first and step == HYDROXYL_SELECTED
    hydrogen_gone = not first and step >= HYDROGEN_SELECTED
    g.append(_atom(300, 220, "#ef4444", "O", glow=hydroxyl_glow, dimmed=hydroxyl_gone))
    g.append(_atom(315, 235, "#bae6fd", "H", size=14, glow=hydroxyl_glow, dimmed=hydroxyl_gone,
                   text_color="#0f172a"))
    g.append(_atom(110, 140, "#bae6fd", "H", size=15, glow=hydrogen_glow, dimmed=hydrogen_gone,
                   text_color="#0f172a"))
    g.append(_atom(110, 220, "#bae6fd", "H", size=15, text_color="#0f172a"))
    g.append("</g>")
    return "".join(g)


def peptide_svg(state: PeptideBondState) -> str:
    if state.step == BONDED:
        body = [
            '<text x="400" y="60" text-anchor="middle" fill="#4ade80" font-size="16" font-weight="bold">'
            'Dipeptide + H₂O</text>',
            _bond(200, 180, 140, 180), _bond(200, 180, 260, 180), _bond(260, 180, 285, 130),
            _bond(260, 180, 340, 180), _bond(340, 180, 400, 180), _bond(400, 180, 460, 180),
            _bond(460, 180, 485, 130), _bond(460, 180, 500, 220), _bond(340, 180, 340, 230),
            _atom(140, 180, "#a855f7", "N"), _atom(200, 180, "#475569", "C"),
            _atom(260, 180, "#475569", "C"), _atom(285, 130, "#ef4444", "O"),
            _atom(340, 180, "#a855f7", "N"), _atom(340, 230, "#bae6fd", "H", size=15, text_color="#0f172a"),
            _atom(400, 180, "#475569", "C"), _atom(460, 180, "#475569", "C"),
            _atom(485, 130, "#ef4444", "O"), _atom(500, 220, "#ef4444", "O"),
            '<text x="300" y="160" text-anchor="middle" fill="#4ade80" font-size="14" '
            'font-weight="bold">Peptide Bond</text>',
            '<line x1="260" y1="180" x2="340" y2="180" stroke="#4ade80" stroke-width="7"/>',
            _atom(640, 240, "#ef4444", "O"), _atom(620, 260, "#bae6fd", "H", size=15, text_color="#0f172a"),
            _atom(660, 260, "#bae6fd", "H", size=15, text_color="#0f172a"),
        ]
        return _svg("0 0 800 320", "".join(body), height=320)

    body = [
        _amino_acid(0, state.step, first=True),
        '<text x="380" y="190" font-size="50" fill="#64748b" font-weight="bold" opacity="0.5">+</text>',
        _amino_acid(360, state.step, first=False),
    ]
    return _svg("0 0 800 320", "".join(body), height=320)


def builder_html(state: AminoBuilderState) -> str:
    """The alpha carbon with its four attachment positions."""
    cells = {}
    for zone in ZONES:
        part = state.part_in(zone)
        if part:
            cells[zone] = f'<b>{escape(PARTS[part]["label"])}</b>'
        else:
            cells[zone] = f'<span style="color:#94a3b8">{zone.title()}</span>'
    cell = ('<td style="width:170px;height:90px;text-align:center;border:2px dashed #cbd5e1;'
            'border-radius:12px">{}</td>')
    return (
        '<table style="margin:auto;border-collapse:separate;border-spacing:10px">'
        f'<tr><td></td>{cell.format(cells["top"])}<td></td></tr>'
        f'<tr>{cell.format(cells["left"])}'
        '<td style="text-align:center;background:#1e293b;color:white;border-radius:50%;'
        'font-size:28px;font-weight:bold">C<br><span style="font-size:11px">alpha</span></td>'
        f'{cell.format(cells["right"])}</tr>'
        f'<tr><td></td>{cell.format(cells["bottom"])}<td></td></tr>'
        '</table>'
    )
